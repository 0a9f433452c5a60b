"""Durable key-value storage backends ("local storage") for client-side state."""

from __future__ import annotations

import os
import pathlib
import re
import tempfile
from typing import Dict, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

import connectspace.database as database
from connectspace.models.local_storage import LocalStorageEntry


class LocalStorageError(Exception):
    """Raised when a backend cannot read or write a key."""


class LocalStorage:
    backend_name = "base"

    def get_item(self, key: str) -> Optional[str]:  # pragma: no cover - interface only
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:  # pragma: no cover - interface only
        raise NotImplementedError

    def remove_item(self, key: str) -> None:  # pragma: no cover - interface only
        raise NotImplementedError


class MemoryLocalStorage(LocalStorage):
    backend_name = "memory"

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileLocalStorage(LocalStorage):
    """One UTF-8 file per key under ``base_path``."""

    backend_name = "file"

    def __init__(self, base_path: Optional[str] = None) -> None:
        base_path = base_path or os.getenv("WISHLIST_STORAGE_PATH", "storage/local")
        self.base_path = pathlib.Path(base_path).resolve()
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise LocalStorageError(f"Cannot create storage directory {self.base_path}: {exc}") from exc

    def _sanitize_key(self, key: str) -> str:
        name = re.sub(r"[^A-Za-z0-9._-]", "_", key).strip("._")
        if not name:
            raise LocalStorageError(f"Invalid storage key: {key!r}")
        return name

    def _path_for(self, key: str) -> pathlib.Path:
        path = (self.base_path / f"{self._sanitize_key(key)}.json").resolve()
        if not path.is_relative_to(self.base_path):
            raise LocalStorageError(f"Invalid storage key: {key!r}")
        return path

    def get_item(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise LocalStorageError(f"Failed to read {key!r}: {exc}") from exc

    def set_item(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.base_path, prefix=f".{path.stem}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                pathlib.Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise LocalStorageError(f"Failed to write {key!r}: {exc}") from exc

    def remove_item(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as exc:
            raise LocalStorageError(f"Failed to remove {key!r}: {exc}") from exc


class SqlLocalStorage(LocalStorage):
    """Keys stored as rows of the ``local_storage`` table."""

    backend_name = "sql"

    def __init__(self, session_factory=None) -> None:
        self._session_factory = session_factory

    def _session(self):
        factory = self._session_factory or database.SessionLocal
        return factory()

    def get_item(self, key: str) -> Optional[str]:
        try:
            with self._session() as session:
                return session.execute(
                    select(LocalStorageEntry.value).where(LocalStorageEntry.key == key)
                ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise LocalStorageError(f"Failed to read {key!r}: {exc}") from exc

    def set_item(self, key: str, value: str) -> None:
        try:
            with self._session() as session:
                entry = session.get(LocalStorageEntry, key)
                if entry is None:
                    session.add(LocalStorageEntry(key=key, value=value))
                else:
                    entry.value = value
                session.commit()
        except SQLAlchemyError as exc:
            raise LocalStorageError(f"Failed to write {key!r}: {exc}") from exc

    def remove_item(self, key: str) -> None:
        try:
            with self._session() as session:
                entry = session.get(LocalStorageEntry, key)
                if entry is not None:
                    session.delete(entry)
                    session.commit()
        except SQLAlchemyError as exc:
            raise LocalStorageError(f"Failed to remove {key!r}: {exc}") from exc


_storage: Optional[LocalStorage] = None


def get_local_storage() -> LocalStorage:
    global _storage
    if _storage is not None:
        return _storage

    backend = os.getenv("WISHLIST_STORAGE", "file").lower()
    if backend == "file":
        _storage = FileLocalStorage()
    elif backend == "memory":
        _storage = MemoryLocalStorage()
    elif backend == "sql":
        database.init_models()
        _storage = SqlLocalStorage()
    else:  # pragma: no cover - configuration error
        raise RuntimeError(f"Unsupported WISHLIST_STORAGE backend: {backend}")
    return _storage


__all__ = [
    "FileLocalStorage",
    "LocalStorage",
    "LocalStorageError",
    "MemoryLocalStorage",
    "SqlLocalStorage",
    "get_local_storage",
]
