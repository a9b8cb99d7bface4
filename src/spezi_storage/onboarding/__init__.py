"""
Spezi Storage Onboarding Module.

Provides onboarding completion flags and testing setup.
"""

__all__ = ["OnboardingFlag", "FeatureFlags", "apply_testing_setup"]

from spezi_storage.onboarding.flow import FeatureFlags, OnboardingFlag, apply_testing_setup
