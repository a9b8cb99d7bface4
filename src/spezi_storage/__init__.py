"""
Spezi Storage - storage keys and app storage for onboarding state.

A registry of stable storage key constants together with the small
key-value store and onboarding flags that consume them.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "StorageKeys",
    "ONBOARDING_FLOW_COMPLETE",
]

from spezi_storage.core.keys import ONBOARDING_FLOW_COMPLETE, StorageKeys
