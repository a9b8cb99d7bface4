"""
Spezi Storage Exception Hierarchy.

Defines all custom exceptions used across the package.
Provides consistent error handling and debugging information.
"""

from typing import Any


class SpeziStorageError(Exception):
    """
    Base exception for all Spezi Storage errors.

    All custom exceptions inherit from this class, allowing
    generic catch blocks and consistent error handling.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        """
        Initialize a SpeziStorageError.

        Args:
            message: Human-readable error message
            details: Optional structured data for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation with details."""
        base = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class UnknownKeyError(SpeziStorageError):
    """Raised when a symbolic key name is not part of the key registry."""

    def __init__(
        self,
        message: str = "Unknown storage key",
        *,
        name: str | None = None,
        known: list[str] | None = None,
    ):
        details: dict[str, Any] = {}
        if name is not None:
            details["name"] = name
        if known:
            details["known"] = known

        super().__init__(message, details=details)
        self.name = name
        self.known = known or []


class StorageError(SpeziStorageError):
    """
    Errors in app storage operations.

    Raised when key-value storage operations fail, including:
    - Rejected keys or values
    - Failed writes of the storage document
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize a StorageError.

        Args:
            message: Human-readable error message
            key: Storage key involved
            operation: Operation being performed
            details: Optional structured data for debugging
        """
        details = details or {}
        if key:
            details["key"] = key
        if operation:
            details["operation"] = operation

        super().__init__(message, details=details)
        self.key = key
        self.operation = operation


class StorageValueError(StorageError):
    """Raised when a key or value cannot be stored."""

    def __init__(
        self,
        message: str = "Invalid storage value",
        *,
        key: str | None = None,
        value_type: str | None = None,
    ):
        details = {}
        if value_type:
            details["value_type"] = value_type
        super().__init__(message, key=key, operation="set", details=details)
        self.value_type = value_type


class StorageWriteError(StorageError):
    """Raised when the storage document cannot be persisted."""

    def __init__(
        self,
        message: str = "Failed to write storage document",
        *,
        path: str | None = None,
        key: str | None = None,
        operation: str | None = None,
    ):
        details = {}
        if path:
            details["path"] = path
        super().__init__(message, key=key, operation=operation, details=details)
        self.path = path


class ConfigurationError(SpeziStorageError):
    """
    Errors in package configuration.

    Raised when an environment setting cannot be parsed.
    """

    def __init__(
        self,
        message: str,
        *,
        setting: str | None = None,
        value: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize a ConfigurationError.

        Args:
            message: Human-readable error message
            setting: Name of the environment variable
            value: The rejected raw value
            details: Optional structured data for debugging
        """
        details = details or {}
        if setting:
            details["setting"] = setting
        if value is not None:
            details["value"] = value

        super().__init__(message, details=details)
        self.setting = setting
        self.value = value
