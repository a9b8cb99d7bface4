"""Pytest configuration and fixtures."""

import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from spezi_storage.storage.app_storage import AppStorage

# Keep CLI logging quiet and deterministic for tests
os.environ.setdefault("SPEZI_LOG_LEVEL", "WARNING")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def storage_path(temp_dir: Path) -> Path:
    """Provide a storage document path inside the temporary directory."""
    return temp_dir / "storage" / "app_storage.json"


@pytest.fixture
def storage(storage_path: Path) -> AppStorage:
    """Provide an empty app storage backed by a temporary file."""
    return AppStorage(storage_path)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove package environment variables for the duration of a test."""
    for name in ("SPEZI_STORAGE_PATH", "SPEZI_SHOW_ONBOARDING", "SPEZI_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
