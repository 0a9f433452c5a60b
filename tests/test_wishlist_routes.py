from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from connectspace.main import app
from connectspace.services.local_storage import MemoryLocalStorage
from connectspace.services.wishlist_store import WishlistStore, get_wishlist_store


def _event_payload(event_id: int = 50, **overrides) -> dict:
    payload = {
        "id": event_id,
        "title": "Board Games Evening",
        "description": "Bring a friend and a game",
        "date": "2024-05-03",
        "time": "7:00 PM",
        "endTime": "10:00 PM",
        "location": "Cafe Tabletop",
        "category": "Social",
        "price": 0,
        "organizer": "Game Night Crew",
        "attendees": 12,
        "maxAttendees": 30,
        "tags": ["Games", "Social"],
        "communityId": 9,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def store():
    return WishlistStore(MemoryLocalStorage())


@pytest.fixture
def client(store):
    app.dependency_overrides[get_wishlist_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_items_start_with_demo_events(client):
    response = client.get("/wishlist/items")

    assert response.status_code == 200
    body = response.json()
    assert [item["id"] for item in body] == [1, 2, 3, 4, 5]
    assert body[0]["maxAttendees"] == 1000


def test_add_is_idempotent(client, store):
    first = client.post("/wishlist", json=_event_payload())
    second = client.post("/wishlist", json=_event_payload(title="Changed"))

    assert first.status_code == 201
    assert first.json() == {"event_id": 50, "added": True, "count": 6}
    assert second.json() == {"event_id": 50, "added": False, "count": 6}
    assert next(e for e in store.items if e.id == 50).title == "Board Games Evening"


def test_concurrent_posts_of_same_event_add_it_once(client, store):
    def post(_):
        return TestClient(app).post("/wishlist", json=_event_payload()).json()

    with ThreadPoolExecutor(max_workers=8) as pool:
        bodies = list(pool.map(post, range(8)))

    assert [body["added"] for body in bodies].count(True) == 1
    assert [e.id for e in store.items].count(50) == 1
    assert len(store) == 6


def test_add_rejects_malformed_event(client, store):
    payload = _event_payload()
    del payload["title"]

    response = client.post("/wishlist", json=payload)

    assert response.status_code == 422
    assert len(store) == 5


def test_membership_and_remove(client):
    assert client.get("/wishlist/3").json() == {"event_id": 3, "wishlisted": True}

    removed = client.delete("/wishlist/3")
    missing = client.delete("/wishlist/3")

    assert removed.json() == {"event_id": 3, "removed": True, "count": 4}
    assert missing.json() == {"event_id": 3, "removed": False, "count": 4}
    assert client.get("/wishlist/3").json()["wishlisted"] is False


def test_toggle(client):
    on = client.post("/wishlist/toggle", json=_event_payload(77))
    off = client.post("/wishlist/toggle", json=_event_payload(77))

    assert on.json()["wishlisted"] is True
    assert off.json() == {"event_id": 77, "wishlisted": False, "count": 5}


def test_clear(client, store):
    assert client.delete("/wishlist").json() == {"count": 0}
    assert client.get("/wishlist/items").json() == []
    assert WishlistStore(store.storage).items == []


def test_view_applies_filters(client):
    response = client.get("/wishlist", params={"price": "free", "sort": "title-asc"})

    assert response.status_code == 200
    body = response.json()
    assert [e["id"] for e in body["events"]] == [2]
    assert body["total"] == 5
    assert body["matched"] == 1
    assert body["categories"][0] == "All"
    assert body["by_month"] == [{"month": "February 2024", "events": body["events"]}]


def test_view_search_and_category(client):
    response = client.get("/wishlist", params={"search": "networking", "category": "Business"})

    assert [e["id"] for e in response.json()["events"]] == [4]


def test_view_rejects_unknown_sort(client):
    assert client.get("/wishlist", params={"sort": "popularity"}).status_code == 422


def test_categories_and_summary(client):
    categories = client.get("/wishlist/categories").json()
    summary = client.get("/wishlist/summary").json()

    assert categories == ["All", "Technology", "Environment", "Creative", "Business", "Wellness"]
    assert summary["total"] == 5
    assert summary["featured"] == 3
    assert [e["id"] for e in summary["next_events"]] == [2, 1, 3]
    assert summary["remaining"] == 2
