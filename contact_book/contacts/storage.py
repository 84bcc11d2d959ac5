"""Key-value storage backends for the local contact list.

The local variant keeps the whole collection as one JSON blob under a single
key, so a backend only needs to read and overwrite strings by key.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from ..config import Settings

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Raised when a storage backend cannot read or write a key."""


class KeyValueStorage:
    """Minimal string store keyed by name."""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError


class MemoryStorage(KeyValueStorage):
    """Dict-backed storage; contents vanish with the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileStorage(KeyValueStorage):
    """One ``<key>.json`` file per key inside a directory."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        safe_key = key.replace("/", "_").replace("\\", "_")
        return self.directory / f"{safe_key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Could not read {path}: {exc}") from exc

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as handle:
                handle.write(value)
        except OSError as exc:
            raise StorageError(f"Could not write {path}: {exc}") from exc

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Could not remove {path}: {exc}") from exc


def get_storage(settings: Settings) -> KeyValueStorage:
    """Return the storage backend selected by settings."""
    if settings.storage_force_memory:
        logger.info("[Contacts] Using in-memory storage")
        return MemoryStorage()
    return FileStorage(settings.storage_dir)
