from __future__ import annotations

import json
import logging
import os
import threading
from typing import Callable, Iterator, List, Optional

from pydantic import ValidationError

from connectspace.demo_events import DEFAULT_BOOTSTRAP_SIZE, bootstrap_sample
from connectspace.schemas import Event
from connectspace.services.local_storage import LocalStorage, LocalStorageError, get_local_storage


_LOGGER = logging.getLogger(__name__)

WISHLIST_STORAGE_KEY = "wishlist"

Listener = Callable[[List[Event]], None]


class WishlistStore:
    """Insertion-ordered set of saved events, mirrored to local storage.

    Every effective mutation rewrites the whole snapshot under
    ``WISHLIST_STORAGE_KEY`` and notifies subscribers. Storage failures are
    logged and never raised to callers.

    Route handlers run on a worker thread pool, so check, mutate, persist and
    hydrate all happen under ``_lock``. Listeners are called after the lock is
    released.
    """

    def __init__(
        self,
        storage: LocalStorage,
        *,
        bootstrap_size: Optional[int] = None,
        key: str = WISHLIST_STORAGE_KEY,
    ) -> None:
        self.storage = storage
        self.key = key
        self.bootstrap_size = DEFAULT_BOOTSTRAP_SIZE if bootstrap_size is None else bootstrap_size
        self._items: List[Event] = []
        self._listeners: List[Listener] = []
        self._hydrated = False
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Hydration
    # ------------------------------------------------------------------
    @property
    def hydrated(self) -> bool:
        return self._hydrated

    def hydrate(self) -> List[Event]:
        """Load the stored snapshot, or seed and persist the bootstrap sample."""

        with self._lock:
            snapshot = self._load()
        self._notify(snapshot)
        return list(snapshot)

    def _load(self) -> List[Event]:
        # caller holds _lock
        try:
            raw = self.storage.get_item(self.key)
        except LocalStorageError as exc:
            _LOGGER.warning("Could not read wishlist from %s storage: %s", self.storage.backend_name, exc)
            raw = None

        items = self._parse_snapshot(raw) if raw is not None else None
        if items is None:
            items = bootstrap_sample(self.bootstrap_size)
            _LOGGER.info("Seeding wishlist with %s demo events", len(items))
            self._items = items
            self._persist()
        else:
            _LOGGER.info("Loaded %s wishlisted events from %s storage", len(items), self.storage.backend_name)
            self._items = items

        self._hydrated = True
        return list(self._items)

    def _parse_snapshot(self, raw: str) -> Optional[List[Event]]:
        try:
            payload = json.loads(raw)
        except ValueError as exc:
            _LOGGER.warning("Stored wishlist is not valid JSON, falling back to demo events: %s", exc)
            return None
        if not isinstance(payload, list):
            _LOGGER.warning(
                "Stored wishlist is a %s, not an array; falling back to demo events",
                type(payload).__name__,
            )
            return None

        items: List[Event] = []
        seen: set[int] = set()
        for index, record in enumerate(payload):
            try:
                event = Event.model_validate(record)
            except ValidationError as exc:
                _LOGGER.warning("Dropping malformed wishlist entry %s: %s", index, exc.errors(include_url=False))
                continue
            if event.id in seen:
                _LOGGER.warning("Dropping duplicate wishlist entry for event %s", event.id)
                continue
            seen.add(event.id)
            items.append(event)
        return items

    def _ensure_hydrated(self) -> None:
        if self._hydrated:
            return
        with self._lock:
            if self._hydrated:
                return
            snapshot = self._load()
        self._notify(snapshot)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def items(self) -> List[Event]:
        return self.snapshot()

    def snapshot(self) -> List[Event]:
        self._ensure_hydrated()
        with self._lock:
            return list(self._items)

    def has(self, event_id: int) -> bool:
        self._ensure_hydrated()
        with self._lock:
            return self._contains(event_id)

    def add(self, event: Event) -> bool:
        self._ensure_hydrated()
        with self._lock:
            if self._contains(event.id):
                return False
            self._items = [*self._items, event]
            snapshot = self._persist()
        self._notify(snapshot)
        return True

    def remove(self, event_id: int) -> bool:
        self._ensure_hydrated()
        with self._lock:
            if not self._contains(event_id):
                return False
            self._items = [item for item in self._items if item.id != event_id]
            snapshot = self._persist()
        self._notify(snapshot)
        return True

    def toggle(self, event: Event) -> bool:
        """Remove the event if saved, otherwise save it. Returns the new state."""

        self._ensure_hydrated()
        with self._lock:
            if self._contains(event.id):
                self._items = [item for item in self._items if item.id != event.id]
                wishlisted = False
            else:
                self._items = [*self._items, event]
                wishlisted = True
            snapshot = self._persist()
        self._notify(snapshot)
        return wishlisted

    def clear(self) -> None:
        self._ensure_hydrated()
        with self._lock:
            self._items = []
            snapshot = self._persist()
        self._notify(snapshot)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for change notifications; returns an unsubscribe hook."""

        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def __len__(self) -> int:
        return len(self.snapshot())

    def __iter__(self) -> Iterator[Event]:
        return iter(self.snapshot())

    def __contains__(self, event_id: object) -> bool:
        return isinstance(event_id, int) and self.has(event_id)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _contains(self, event_id: int) -> bool:
        return any(item.id == event_id for item in self._items)

    def _persist(self) -> List[Event]:
        # caller holds _lock; returns the snapshot that was written
        snapshot = list(self._items)
        payload = json.dumps([item.to_storage() for item in snapshot])
        try:
            self.storage.set_item(self.key, payload)
        except LocalStorageError:
            _LOGGER.exception(
                "Failed to persist wishlist (%s items) to %s storage",
                len(snapshot),
                self.storage.backend_name,
            )
        return snapshot

    def _notify(self, snapshot: List[Event]) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(list(snapshot))
            except Exception:
                _LOGGER.exception("Wishlist listener %r failed", listener)


def _bootstrap_size_from_env() -> int:
    try:
        return int(os.getenv("WISHLIST_BOOTSTRAP_SIZE", str(DEFAULT_BOOTSTRAP_SIZE)))
    except ValueError:
        return DEFAULT_BOOTSTRAP_SIZE


_store: Optional[WishlistStore] = None


def get_wishlist_store() -> WishlistStore:
    global _store
    if _store is None:
        _store = WishlistStore(get_local_storage(), bootstrap_size=_bootstrap_size_from_env())
    return _store


__all__ = ["WISHLIST_STORAGE_KEY", "WishlistStore", "get_wishlist_store"]
