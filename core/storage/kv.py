"""
StockMaster Core Storage - Key-Value Stores
==============================================
String-keyed, string-valued storage. Callers serialize whole
collections into a single value and write them back in one call;
stores never interpret the values.

Implementations:
- InMemoryKeyValueStore  (tests, throwaway sessions)
- JsonFileKeyValueStore  (one JSON object on disk, rewritten on every set)
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Union

logger = logging.getLogger("stockmaster.storage")


# ══════════════════════════════════════════════════════════════
# ERRORS
# ══════════════════════════════════════════════════════════════

class StorageError(Exception):
    """Base error for key-value storage."""
    pass


class CorruptStoreError(StorageError):
    """Backing file exists but is not a JSON object of strings."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        super().__init__(f"Store file '{path}' is unreadable: {detail}")


# ══════════════════════════════════════════════════════════════
# PROTOCOL
# ══════════════════════════════════════════════════════════════

class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key was never set."""
        ...  # pragma: no cover

    def set(self, key: str, value: str) -> None:
        """Replace the value under key."""
        ...  # pragma: no cover

    def remove(self, key: str) -> None:
        """Delete key if present."""
        ...  # pragma: no cover

    def keys(self) -> List[str]:
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# IN-MEMORY STORE
# ══════════════════════════════════════════════════════════════

class InMemoryKeyValueStore:
    """Thread-safe dict-backed store."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("Stored values must be strings.")
        with self._lock:
            self._data[key] = value

    def remove(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def keys(self) -> List[str]:
        with self._lock:
            return sorted(self._data)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()


# ══════════════════════════════════════════════════════════════
# JSON FILE STORE
# ══════════════════════════════════════════════════════════════

class JsonFileKeyValueStore:
    """
    Persists all keys as one JSON object in a single file.

    The file is loaded once at construction. Every set/remove rewrites
    the whole file through a temporary file and os.replace, so a crash
    mid-write leaves the previous contents intact.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()
        self._data: Dict[str, str] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> Dict[str, str]:
        if not self._path.exists():
            logger.debug(f"Store file {self._path} not found, starting empty")
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as exc:
            raise CorruptStoreError(self._path, str(exc)) from exc
        if not isinstance(raw, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in raw.items()
        ):
            raise CorruptStoreError(self._path, "expected an object of strings")
        return raw

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=str(self._path.parent), prefix=self._path.name, suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(self._data, handle, indent=2, sort_keys=True)
            os.replace(tmp_name, self._path)
        except OSError:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("Stored values must be strings.")
        with self._lock:
            self._data[key] = value
            self._flush()

    def remove(self, key: str) -> None:
        with self._lock:
            if self._data.pop(key, None) is not None:
                self._flush()

    def keys(self) -> List[str]:
        with self._lock:
            return sorted(self._data)
