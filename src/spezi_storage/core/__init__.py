"""
Spezi Storage Core Module.

Provides the storage key registry and the exception hierarchy.
"""

__all__ = [
    "StorageKeys",
    "ONBOARDING_FLOW_COMPLETE",
    "LOCAL_ONBOARDING_FLOW_COMPLETE",
    "FOG_ONBOARDING_FLOW_COMPLETE",
    "ONBOARDING_KEYS",
    "all_keys",
    "lookup_key",
    # Exceptions
    "SpeziStorageError",
    "UnknownKeyError",
    "StorageError",
    "StorageValueError",
    "StorageWriteError",
    "ConfigurationError",
]

from spezi_storage.core.exceptions import (
    ConfigurationError,
    SpeziStorageError,
    StorageError,
    StorageValueError,
    StorageWriteError,
    UnknownKeyError,
)
from spezi_storage.core.keys import (
    FOG_ONBOARDING_FLOW_COMPLETE,
    LOCAL_ONBOARDING_FLOW_COMPLETE,
    ONBOARDING_FLOW_COMPLETE,
    ONBOARDING_KEYS,
    StorageKeys,
    all_keys,
    lookup_key,
)
