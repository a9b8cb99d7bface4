"""Tests for onboarding flags and testing setup."""

from pathlib import Path

import pytest

from spezi_storage.core.exceptions import ConfigurationError
from spezi_storage.core.keys import ONBOARDING_KEYS, StorageKeys
from spezi_storage.onboarding.flow import FeatureFlags, OnboardingFlag, apply_testing_setup
from spezi_storage.storage.app_storage import AppStorage


class TestOnboardingFlag:
    """Tests for OnboardingFlag."""

    def test_default_key(self, storage: AppStorage) -> None:
        """Flag binds the onboarding completion key by default."""
        flag = OnboardingFlag(storage)
        assert flag.key is StorageKeys.ONBOARDING_FLOW_COMPLETE

    def test_not_completed_by_default(self, storage: AppStorage) -> None:
        """A fresh storage reports onboarding as not completed."""
        assert OnboardingFlag(storage).completed is False

    def test_complete(self, storage: AppStorage) -> None:
        """complete() stores True under the key literal."""
        flag = OnboardingFlag(storage)
        flag.complete()

        assert flag.completed is True
        assert storage.get("onboardingFlow.complete") is True

    def test_reset(self, storage: AppStorage) -> None:
        """reset() stores False."""
        flag = OnboardingFlag(storage)
        flag.complete()
        flag.reset()

        assert flag.completed is False
        assert storage.get("onboardingFlow.complete") is False

    def test_flags_are_independent(self, storage: AppStorage) -> None:
        """Each onboarding key holds its own state."""
        OnboardingFlag(storage, StorageKeys.FOG_ONBOARDING_FLOW_COMPLETE).complete()

        assert OnboardingFlag(storage, StorageKeys.FOG_ONBOARDING_FLOW_COMPLETE).completed
        assert not OnboardingFlag(storage, StorageKeys.LOCAL_ONBOARDING_FLOW_COMPLETE).completed
        assert not OnboardingFlag(storage).completed

    def test_completion_persists(self, storage: AppStorage, storage_path: Path) -> None:
        """Completion is visible to a new storage instance."""
        OnboardingFlag(storage).complete()
        assert OnboardingFlag(AppStorage(storage_path)).completed is True


class TestFeatureFlags:
    """Tests for FeatureFlags."""

    def test_defaults(self) -> None:
        """Flags are off by default."""
        assert FeatureFlags().show_onboarding is False

    def test_from_args(self) -> None:
        """--showOnboarding launch argument enables the flag."""
        assert FeatureFlags.from_args(["app", "--showOnboarding"]).show_onboarding is True
        assert FeatureFlags.from_args(["app"]).show_onboarding is False

    def test_from_env(self, clean_env: pytest.MonkeyPatch) -> None:
        """SPEZI_SHOW_ONBOARDING enables the flag."""
        clean_env.setenv("SPEZI_SHOW_ONBOARDING", "true")
        assert FeatureFlags.from_env().show_onboarding is True

    def test_from_env_invalid(self, clean_env: pytest.MonkeyPatch) -> None:
        """An unparseable environment value is a configuration error."""
        clean_env.setenv("SPEZI_SHOW_ONBOARDING", "maybe")
        with pytest.raises(ConfigurationError, match="SPEZI_SHOW_ONBOARDING"):
            FeatureFlags.from_env()

    def test_load_merges_sources(self, clean_env: pytest.MonkeyPatch) -> None:
        """Either launch arguments or environment enable a flag."""
        assert FeatureFlags.load(["app"]).show_onboarding is False
        assert FeatureFlags.load(["app", "--showOnboarding"]).show_onboarding is True

        clean_env.setenv("SPEZI_SHOW_ONBOARDING", "1")
        assert FeatureFlags.load(["app"]).show_onboarding is True


class TestApplyTestingSetup:
    """Tests for apply_testing_setup."""

    def test_no_flags_no_changes(self, storage: AppStorage) -> None:
        """Without show_onboarding nothing is reset."""
        OnboardingFlag(storage).complete()

        reset = apply_testing_setup(storage, FeatureFlags())

        assert reset == []
        assert OnboardingFlag(storage).completed is True

    def test_show_onboarding_resets_main_flag(self, storage: AppStorage) -> None:
        """show_onboarding resets only the onboarding completion flag by default."""
        for key in ONBOARDING_KEYS:
            OnboardingFlag(storage, key).complete()

        reset = apply_testing_setup(storage, FeatureFlags(show_onboarding=True))

        assert reset == [StorageKeys.ONBOARDING_FLOW_COMPLETE]
        assert OnboardingFlag(storage).completed is False
        assert OnboardingFlag(storage, StorageKeys.LOCAL_ONBOARDING_FLOW_COMPLETE).completed
        assert OnboardingFlag(storage, StorageKeys.FOG_ONBOARDING_FLOW_COMPLETE).completed

    def test_show_onboarding_all_keys(self, storage: AppStorage) -> None:
        """Passing every onboarding key resets all of them."""
        for key in ONBOARDING_KEYS:
            OnboardingFlag(storage, key).complete()

        reset = apply_testing_setup(
            storage, FeatureFlags(show_onboarding=True), keys=ONBOARDING_KEYS
        )

        assert reset == list(ONBOARDING_KEYS)
        for key in ONBOARDING_KEYS:
            assert OnboardingFlag(storage, key).completed is False

    def test_show_onboarding_selected_keys(self, storage: AppStorage) -> None:
        """Only the given keys are reset."""
        OnboardingFlag(storage).complete()
        OnboardingFlag(storage, StorageKeys.LOCAL_ONBOARDING_FLOW_COMPLETE).complete()

        reset = apply_testing_setup(
            storage,
            FeatureFlags(show_onboarding=True),
            keys=[StorageKeys.LOCAL_ONBOARDING_FLOW_COMPLETE],
        )

        assert reset == [StorageKeys.LOCAL_ONBOARDING_FLOW_COMPLETE]
        assert OnboardingFlag(storage).completed is True
        assert OnboardingFlag(storage, StorageKeys.LOCAL_ONBOARDING_FLOW_COMPLETE).completed is False
