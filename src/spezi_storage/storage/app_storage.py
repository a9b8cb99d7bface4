"""
App Storage - persistent key-value storage for application flags.

Implements a single JSON document keyed by storage key strings.
"""

import json
import logging
import math
import os
import threading
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Iterator

from pydantic import BaseModel, Field

from spezi_storage.config import StorageSettings
from spezi_storage.core.exceptions import StorageValueError, StorageWriteError
from spezi_storage.core.keys import StorageKeys

logger = logging.getLogger(__name__)

StorageValue = bool | int | float | str


class StorageOperation(Enum):
    """Operations on app storage values."""

    GET = "get"
    SET = "set"
    REMOVE = "remove"
    CLEAR = "clear"


class StorageDocument(BaseModel):
    """Root document persisted by app storage."""

    version: str = "1.0"
    last_updated: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    values: dict[str, StorageValue] = Field(
        default_factory=dict, description="key -> value"
    )

    def touch(self) -> None:
        """Refresh the last update timestamp."""
        self.last_updated = datetime.now(timezone.utc).isoformat()


def _key_str(key: str | StorageKeys) -> str:
    """Normalize a registry member or raw string to its storage key."""
    if isinstance(key, StorageKeys):
        return key.value
    if not isinstance(key, str) or not key:
        raise StorageValueError("Storage key must be a non-empty string", key=str(key))
    return key


class AppStorage:
    """
    Key-value storage backend.

    Manages a single JSON document containing every stored value.
    Writes go through a temporary file and an atomic replace so a
    crashed write never leaves a partial document behind.
    """

    def __init__(self, path: Path | None = None):
        """Initialize storage with the document path."""
        self._path = path or StorageSettings.from_env().storage_path
        self._lock = threading.Lock()
        self._document: StorageDocument | None = None

    @property
    def path(self) -> Path:
        """Location of the storage document."""
        return self._path

    @property
    def document(self) -> StorageDocument:
        """Get or load the storage document."""
        if self._document is None:
            self._document = self._load_document()
        return self._document

    def _load_document(self) -> StorageDocument:
        """Load document from disk or create new."""
        if self._path.exists():
            try:
                data = json.loads(self._path.read_text())
                return StorageDocument.model_validate(data)
            except (ValueError, OSError) as e:
                logger.warning(f"Ignoring unreadable storage document {self._path}: {e}")
        return StorageDocument()

    def _save_document(self, key: str | None, operation: StorageOperation) -> None:
        """Persist document to disk atomically using write-replace pattern."""
        temp_path = self._path.with_name(f"{self._path.name}.tmp")

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(self.document.model_dump_json(indent=2))
            os.replace(temp_path, self._path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise StorageWriteError(
                f"Failed to write storage document: {e}",
                path=str(self._path),
                key=key,
                operation=operation.value,
            ) from e

    def get(self, key: str | StorageKeys, default: Any = None) -> Any:
        """Return the stored value for a key, or default if unset."""
        key = _key_str(key)
        with self._lock:
            value = self.document.values.get(key, default)
        logger.debug(f"Read storage key {key}")
        return value

    def get_bool(self, key: str | StorageKeys, default: bool = False) -> bool:
        """Return a stored boolean; non-boolean values yield the default."""
        value = self.get(key)
        if value is None:
            return default
        if not isinstance(value, bool):
            logger.warning(
                f"Storage key {_key_str(key)} holds {type(value).__name__}, expected bool"
            )
            return default
        return value

    def set(self, key: str | StorageKeys, value: StorageValue) -> None:
        """
        Store a value and persist the document.

        Raises:
            StorageValueError: If the key is empty, the value is not a scalar,
                or the value is a non-finite float
            StorageWriteError: If the document cannot be written
        """
        key = _key_str(key)
        if not isinstance(value, (bool, int, float, str)):
            raise StorageValueError(
                f"Cannot store value of type {type(value).__name__}",
                key=key,
                value_type=type(value).__name__,
            )
        # JSON has no representation for nan or infinity
        if isinstance(value, float) and not math.isfinite(value):
            raise StorageValueError(
                f"Cannot store non-finite float {value}",
                key=key,
                value_type="float",
            )

        with self._lock:
            previous = self.document.values.get(key)
            last_updated = self.document.last_updated
            self.document.values[key] = value
            self.document.touch()
            try:
                self._save_document(key, StorageOperation.SET)
            except StorageWriteError:
                if previous is None:
                    self.document.values.pop(key, None)
                else:
                    self.document.values[key] = previous
                self.document.last_updated = last_updated
                raise
        logger.debug(f"Stored storage key {key}")

    def remove(self, key: str | StorageKeys) -> bool:
        """Remove a value. Returns whether the key was present."""
        key = _key_str(key)
        with self._lock:
            if key not in self.document.values:
                return False
            last_updated = self.document.last_updated
            previous = self.document.values.pop(key)
            self.document.touch()
            try:
                self._save_document(key, StorageOperation.REMOVE)
            except StorageWriteError:
                self.document.values[key] = previous
                self.document.last_updated = last_updated
                raise
        logger.debug(f"Removed storage key {key}")
        return True

    def contains(self, key: str | StorageKeys) -> bool:
        """Check whether a value is stored for the key."""
        key = _key_str(key)
        with self._lock:
            return key in self.document.values

    def keys(self) -> list[str]:
        """List all stored keys, sorted."""
        with self._lock:
            return sorted(self.document.values)

    def items(self) -> Iterator[tuple[str, StorageValue]]:
        """Iterate over a snapshot of stored (key, value) pairs."""
        with self._lock:
            snapshot = sorted(self.document.values.items())
        return iter(snapshot)

    def clear(self) -> None:
        """Remove every stored value."""
        with self._lock:
            previous = dict(self.document.values)
            last_updated = self.document.last_updated
            self.document.values.clear()
            self.document.touch()
            try:
                self._save_document(None, StorageOperation.CLEAR)
            except StorageWriteError:
                self.document.values.update(previous)
                self.document.last_updated = last_updated
                raise
        logger.info(f"Cleared {len(previous)} values from {self._path}")

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and bool(key) and self.contains(key)
