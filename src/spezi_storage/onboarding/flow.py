"""
Onboarding Flow - completion flags and launch-time testing setup.

The completion state of each onboarding flow lives in app storage under
one of the registered onboarding keys. Launching with ``--showOnboarding``
resets the main onboarding flag so the flow is presented again.
"""

import logging
import sys
from typing import Iterable, Sequence

from pydantic import BaseModel

from spezi_storage.config import StorageSettings
from spezi_storage.core.keys import StorageKeys
from spezi_storage.storage.app_storage import AppStorage

logger = logging.getLogger(__name__)

SHOW_ONBOARDING_ARGUMENT = "--showOnboarding"
DEFAULT_TESTING_RESET_KEYS: tuple[StorageKeys, ...] = (StorageKeys.ONBOARDING_FLOW_COMPLETE,)


class OnboardingFlag:
    """Boolean binding of an onboarding key in app storage, default False."""

    def __init__(
        self,
        storage: AppStorage,
        key: StorageKeys = StorageKeys.ONBOARDING_FLOW_COMPLETE,
    ):
        self._storage = storage
        self._key = key

    @property
    def key(self) -> StorageKeys:
        return self._key

    @property
    def completed(self) -> bool:
        """Whether the onboarding flow was completed."""
        return self._storage.get_bool(self._key, False)

    def complete(self) -> None:
        """Mark the onboarding flow as completed."""
        self._storage.set(self._key, True)
        logger.info(f"Onboarding completed ({self._key.value})")

    def reset(self) -> None:
        """Mark the onboarding flow as not completed."""
        self._storage.set(self._key, False)
        logger.info(f"Onboarding reset ({self._key.value})")


class FeatureFlags(BaseModel):
    """Launch-time switches used by UI tests and development builds."""

    show_onboarding: bool = False

    @classmethod
    def from_args(cls, argv: Sequence[str]) -> "FeatureFlags":
        """Read flags from process launch arguments."""
        return cls(show_onboarding=SHOW_ONBOARDING_ARGUMENT in argv)

    @classmethod
    def from_env(cls) -> "FeatureFlags":
        """Read flags from environment."""
        return cls(show_onboarding=StorageSettings.from_env().show_onboarding)

    @classmethod
    def load(cls, argv: Sequence[str] | None = None) -> "FeatureFlags":
        """Merge launch arguments and environment; either source enables a flag."""
        from_args = cls.from_args(sys.argv if argv is None else argv)
        from_env = cls.from_env()
        return cls(show_onboarding=from_args.show_onboarding or from_env.show_onboarding)


def apply_testing_setup(
    storage: AppStorage,
    flags: FeatureFlags,
    keys: Iterable[StorageKeys] | None = None,
) -> list[StorageKeys]:
    """
    Prepare app storage for a test launch.

    Returns:
        The onboarding keys that were reset
    """
    if not flags.show_onboarding:
        return []

    reset = []
    for key in keys if keys is not None else DEFAULT_TESTING_RESET_KEYS:
        OnboardingFlag(storage, key).reset()
        reset.append(key)
    return reset
