"""
StockMaster Core Storage - Public API
========================================
Explicit key-value store objects handed to the ledger.
"""

from core.storage.kv import (
    CorruptStoreError,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStore,
    StorageError,
)

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "StorageError",
    "CorruptStoreError",
]
