"""
Configuration - environment-driven settings for storage and logging.

Environment variables:
- SPEZI_STORAGE_PATH: Location of the app storage document
- SPEZI_SHOW_ONBOARDING: Reset onboarding flags during testing setup
- SPEZI_LOG_LEVEL: Logging level name (default WARNING)
"""

import logging
import os
from pathlib import Path

from pydantic import BaseModel

from spezi_storage.core.exceptions import ConfigurationError

DEFAULT_STORAGE_PATH = Path("var/storage/app_storage.json")
DEFAULT_LOG_LEVEL = "WARNING"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def parse_bool(setting: str, raw: str | None) -> bool:
    """
    Parse a boolean environment value.

    Raises:
        ConfigurationError: If the value is not a recognized boolean
    """
    if raw is None:
        return False
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid boolean value for {setting}",
        setting=setting,
        value=raw,
    )


class StorageSettings(BaseModel):
    """Settings for the app storage facility."""

    storage_path: Path = DEFAULT_STORAGE_PATH
    show_onboarding: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "StorageSettings":
        """Load settings from environment."""
        storage_path = os.getenv("SPEZI_STORAGE_PATH")
        log_level = os.getenv("SPEZI_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if log_level not in logging.getLevelNamesMapping():
            raise ConfigurationError(
                "Invalid log level",
                setting="SPEZI_LOG_LEVEL",
                value=log_level,
            )

        return cls(
            storage_path=Path(storage_path) if storage_path else DEFAULT_STORAGE_PATH,
            show_onboarding=parse_bool(
                "SPEZI_SHOW_ONBOARDING", os.getenv("SPEZI_SHOW_ONBOARDING")
            ),
            log_level=log_level,
        )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for command-line use."""
    level = level or StorageSettings.from_env().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
