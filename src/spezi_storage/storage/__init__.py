"""
Spezi Storage App Storage Module.

Provides persistent key-value storage addressed by storage keys.
"""

__all__ = ["AppStorage", "StorageDocument", "StorageOperation"]

from spezi_storage.storage.app_storage import AppStorage, StorageDocument, StorageOperation
