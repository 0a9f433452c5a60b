"""Pure filter / sort / grouping helpers over a wishlist snapshot."""

from __future__ import annotations

import datetime as dt
import unicodedata
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from connectspace.schemas import (
    ALL_CATEGORIES,
    Event,
    MonthGroup,
    SortKey,
    WishlistFilters,
    WishlistSummary,
    WishlistView,
)

UPCOMING_WINDOW_DAYS = 7
SUMMARY_PREVIEW_SIZE = 3

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _title_key(title: str) -> str:
    # accents sort with their base letter ("Éclair" next to "eclair", not after "z")
    decomposed = unicodedata.normalize("NFKD", title)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


_SORTS: Dict[str, Tuple[Callable[[Event], object], bool]] = {
    "date-asc": (lambda e: e.date, False),
    "date-desc": (lambda e: e.date, True),
    "price-asc": (lambda e: e.price, False),
    "price-desc": (lambda e: e.price, True),
    "title-asc": (lambda e: _title_key(e.title), False),
    "title-desc": (lambda e: _title_key(e.title), True),
}


def _matches_search(event: Event, needle: str) -> bool:
    if not needle:
        return True
    needle = needle.casefold()
    return (
        needle in event.title.casefold()
        or needle in event.description.casefold()
        or any(needle in tag.casefold() for tag in event.tags)
    )


def _matches_category(event: Event, category: str) -> bool:
    return category == ALL_CATEGORIES or event.category == category


def _matches_price(event: Event, price: str) -> bool:
    if price == "free":
        return event.is_free
    if price == "paid":
        return not event.is_free
    return True


def filter_events(events: Iterable[Event], filters: WishlistFilters) -> List[Event]:
    return [
        event
        for event in events
        if _matches_search(event, filters.search)
        and _matches_category(event, filters.category)
        and _matches_price(event, filters.price)
    ]


def sort_events(events: Iterable[Event], sort_key: SortKey = "date-asc") -> List[Event]:
    try:
        key, reverse = _SORTS[sort_key]
    except KeyError:
        raise ValueError(f"Unknown sort key: {sort_key!r}") from None
    # list.sort is stable with reverse=True too, so ties keep input order.
    return sorted(events, key=key, reverse=reverse)


def apply_filters(events: Iterable[Event], filters: Optional[WishlistFilters] = None) -> List[Event]:
    filters = filters or WishlistFilters()
    return sort_events(filter_events(events, filters), filters.sort)


def month_label(day: dt.date) -> str:
    return f"{_MONTH_NAMES[day.month - 1]} {day.year}"


def group_by_month(events: Iterable[Event]) -> Dict[str, List[Event]]:
    """Bucket events by "Month YYYY" in first-seen order."""

    grouped: Dict[str, List[Event]] = {}
    for event in events:
        grouped.setdefault(month_label(event.date), []).append(event)
    return grouped


def _as_date(now: Union[dt.date, dt.datetime, None]) -> dt.date:
    if now is None:
        return dt.date.today()
    if isinstance(now, dt.datetime):
        return now.date()
    return now


def upcoming_events(
    events: Iterable[Event],
    now: Union[dt.date, dt.datetime, None] = None,
    days: int = UPCOMING_WINDOW_DAYS,
) -> List[Event]:
    start = _as_date(now)
    end = start + dt.timedelta(days=days)
    return [event for event in events if start <= event.date <= end]


def available_categories(events: Iterable[Event]) -> List[str]:
    categories = [ALL_CATEGORIES]
    for event in events:
        if event.category not in categories:
            categories.append(event.category)
    return categories


def build_view(
    events: Iterable[Event],
    filters: Optional[WishlistFilters] = None,
    now: Union[dt.date, dt.datetime, None] = None,
) -> WishlistView:
    """Everything the wishlist page renders for one set of filters."""

    filters = filters or WishlistFilters()
    snapshot = list(events)
    visible = apply_filters(snapshot, filters)
    return WishlistView(
        events=visible,
        by_month=[MonthGroup(month=month, events=items) for month, items in group_by_month(visible).items()],
        upcoming=upcoming_events(visible, now),
        categories=available_categories(snapshot),
        total=len(snapshot),
        matched=len(visible),
        filters=filters,
    )


def summarize(
    events: Iterable[Event],
    now: Union[dt.date, dt.datetime, None] = None,
) -> WishlistSummary:
    snapshot = list(events)
    by_date = sort_events(snapshot, "date-asc")
    return WishlistSummary(
        total=len(snapshot),
        featured=sum(1 for event in snapshot if event.featured),
        this_week=len(upcoming_events(snapshot, now)),
        next_events=by_date[:SUMMARY_PREVIEW_SIZE],
        remaining=max(len(snapshot) - SUMMARY_PREVIEW_SIZE, 0),
    )


__all__ = [
    "apply_filters",
    "available_categories",
    "build_view",
    "filter_events",
    "group_by_month",
    "month_label",
    "sort_events",
    "summarize",
    "upcoming_events",
]
