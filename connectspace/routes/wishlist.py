# connectspace/routes/wishlist.py
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from connectspace.schemas import (
    ALL_CATEGORIES,
    Event,
    MembershipRead,
    PriceFilter,
    SortKey,
    WishlistFilters,
    WishlistSummary,
    WishlistView,
)
from connectspace.services.wishlist_store import WishlistStore, get_wishlist_store
from connectspace.services.wishlist_views import available_categories, build_view, summarize

router = APIRouter(prefix="/wishlist", tags=["Wishlist"])
logger = logging.getLogger(__name__)


@router.get("", response_model=WishlistView)
def wishlist_view(
    search: Optional[str] = Query(None, description="Case-insensitive match on title, description or tags"),
    category: str = Query(ALL_CATEGORIES),
    price: PriceFilter = Query("all"),
    sort: SortKey = Query("date-asc"),
    store: WishlistStore = Depends(get_wishlist_store),
):
    filters = WishlistFilters(search=search, category=category, price=price, sort=sort)
    return build_view(store.snapshot(), filters)


@router.get("/items", response_model=List[Event])
def wishlist_items(store: WishlistStore = Depends(get_wishlist_store)):
    return store.snapshot()


@router.get("/categories", response_model=List[str])
def wishlist_categories(store: WishlistStore = Depends(get_wishlist_store)):
    return available_categories(store.snapshot())


@router.get("/summary", response_model=WishlistSummary)
def wishlist_summary(store: WishlistStore = Depends(get_wishlist_store)):
    return summarize(store.snapshot())


@router.post("/toggle", response_model=dict)
def toggle_wishlist(event: Event, store: WishlistStore = Depends(get_wishlist_store)):
    wishlisted = store.toggle(event)
    logger.info("Event %s %s wishlist", event.id, "added to" if wishlisted else "removed from")
    return {"event_id": event.id, "wishlisted": wishlisted, "count": len(store)}


@router.get("/{event_id}", response_model=MembershipRead)
def wishlist_membership(event_id: int, store: WishlistStore = Depends(get_wishlist_store)):
    return MembershipRead(event_id=event_id, wishlisted=store.has(event_id))


@router.post("", status_code=201, response_model=dict)
def add_to_wishlist(event: Event, store: WishlistStore = Depends(get_wishlist_store)):
    added = store.add(event)
    return {"event_id": event.id, "added": added, "count": len(store)}


@router.delete("/{event_id}", response_model=dict)
def remove_from_wishlist(event_id: int, store: WishlistStore = Depends(get_wishlist_store)):
    removed = store.remove(event_id)
    return {"event_id": event_id, "removed": removed, "count": len(store)}


@router.delete("", response_model=dict)
def clear_wishlist(store: WishlistStore = Depends(get_wishlist_store)):
    store.clear()
    logger.info("Wishlist cleared")
    return {"count": 0}
