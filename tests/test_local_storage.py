from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import connectspace.models  # noqa: F401 - registers the local_storage table
from connectspace.database import Base
from connectspace.services import local_storage
from connectspace.services.local_storage import (
    FileLocalStorage,
    LocalStorageError,
    MemoryLocalStorage,
    SqlLocalStorage,
    get_local_storage,
)


def _sql_storage(tmp_path: Path) -> SqlLocalStorage:
    engine = create_engine(f"sqlite:///{(tmp_path / 'local.db').as_posix()}")
    Base.metadata.create_all(engine)
    return SqlLocalStorage(session_factory=sessionmaker(bind=engine, expire_on_commit=False))


@pytest.fixture(params=["memory", "file", "sql"])
def storage(request, tmp_path: Path):
    if request.param == "memory":
        return MemoryLocalStorage()
    if request.param == "file":
        return FileLocalStorage(base_path=str(tmp_path / "local"))
    return _sql_storage(tmp_path)


def test_missing_key_returns_none(storage):
    assert storage.get_item("wishlist") is None


def test_set_overwrites_previous_value(storage):
    storage.set_item("wishlist", "[1]")
    storage.set_item("wishlist", "[1, 2]")
    assert storage.get_item("wishlist") == "[1, 2]"


def test_remove_item_deletes_and_tolerates_absent_keys(storage):
    storage.set_item("wishlist", "[]")
    storage.remove_item("wishlist")
    storage.remove_item("wishlist")
    assert storage.get_item("wishlist") is None


def test_keys_are_independent(storage):
    storage.set_item("wishlist", "a")
    storage.set_item("recent", "b")
    storage.remove_item("recent")
    assert storage.get_item("wishlist") == "a"


def test_file_storage_survives_new_instance(tmp_path: Path):
    base = tmp_path / "local"
    FileLocalStorage(base_path=str(base)).set_item("wishlist", '[{"id": 1}]')

    reopened = FileLocalStorage(base_path=str(base))
    assert reopened.get_item("wishlist") == '[{"id": 1}]'
    assert (base / "wishlist.json").exists()
    assert not list(base.glob("*.tmp"))


def test_file_storage_sanitizes_keys(tmp_path: Path):
    base = tmp_path / "local"
    storage = FileLocalStorage(base_path=str(base))
    storage.set_item("../../etc/passwd", "x")

    assert storage.get_item("../../etc/passwd") == "x"
    assert [p.name for p in base.iterdir()] == ["etc_passwd.json"]


def test_file_storage_rejects_empty_key(tmp_path: Path):
    storage = FileLocalStorage(base_path=str(tmp_path / "local"))
    with pytest.raises(LocalStorageError):
        storage.set_item("..", "x")


def test_sql_storage_survives_new_instance(tmp_path: Path):
    _sql_storage(tmp_path).set_item("wishlist", "[]")
    assert _sql_storage(tmp_path).get_item("wishlist") == "[]"


def test_factory_selects_backend_from_env(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(local_storage, "_storage", None)
    monkeypatch.setenv("WISHLIST_STORAGE", "file")
    monkeypatch.setenv("WISHLIST_STORAGE_PATH", str(tmp_path / "from-env"))

    storage = get_local_storage()

    assert isinstance(storage, FileLocalStorage)
    assert storage.base_path == (tmp_path / "from-env").resolve()
    assert get_local_storage() is storage


def test_factory_memory_backend(monkeypatch):
    monkeypatch.setattr(local_storage, "_storage", None)
    monkeypatch.setenv("WISHLIST_STORAGE", "memory")

    assert get_local_storage().backend_name == "memory"


def test_factory_rejects_unknown_backend(monkeypatch):
    monkeypatch.setattr(local_storage, "_storage", None)
    monkeypatch.setenv("WISHLIST_STORAGE", "indexeddb")

    with pytest.raises(RuntimeError):
        get_local_storage()
