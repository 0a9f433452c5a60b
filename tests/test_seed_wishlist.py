import pytest

from connectspace.demo_events import DEMO_EVENTS
from connectspace.services import local_storage, wishlist_store
from scripts.seed_wishlist import main


@pytest.fixture
def memory_store(monkeypatch):
    monkeypatch.setattr(local_storage, "_storage", None)
    monkeypatch.setattr(wishlist_store, "_store", None)
    monkeypatch.setenv("WISHLIST_STORAGE", "memory")
    return wishlist_store.get_wishlist_store


@pytest.mark.parametrize(
    "argv, expected",
    [
        ([], len(DEMO_EVENTS)),
        (["3"], 3),
        (["0"], 0),
        (["-1"], 0),
        (["-20"], 0),
        (["99"], len(DEMO_EVENTS)),
    ],
)
def test_seed_count_is_clamped_to_demo_dataset(memory_store, capsys, argv, expected):
    main(argv)

    store = memory_store()
    assert [e.id for e in store.items] == [e.id for e in DEMO_EVENTS[:expected]]
    assert f"Seeded wishlist with {expected} demo events (memory storage)." in capsys.readouterr().out
