# connectspace/schemas.py
# ------------------------------------------------------------
# Pydantic v2 schemas for wishlisted events and their read views
# ------------------------------------------------------------
import datetime as dt
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


PriceFilter = Literal["all", "free", "paid"]
SortKey = Literal["date-asc", "date-desc", "price-asc", "price-desc", "title-asc", "title-desc"]

ALL_CATEGORIES = "All"


# ============================================================
# Events
# ============================================================

class Event(BaseModel):
    """A savable event as stored in the wishlist.

    Serialises with camelCase keys (``endTime``, ``maxAttendees``,
    ``communityId``, ``communityName``) and accepts either spelling on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    title: str
    description: str
    date: dt.date
    time: str
    end_time: Optional[str] = None
    location: str
    category: str
    price: int = Field(ge=0)
    image: Optional[str] = None
    organizer: str
    attendees: int
    max_attendees: int
    tags: Tuple[str, ...]
    featured: Optional[bool] = None
    community_id: Optional[int] = None
    community_name: Optional[str] = None

    def to_storage(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @property
    def is_free(self) -> bool:
        return self.price == 0


# ============================================================
# Read views
# ============================================================

class WishlistFilters(BaseModel):
    search: str = ""
    category: str = ALL_CATEGORIES
    price: PriceFilter = "all"
    sort: SortKey = "date-asc"

    @field_validator("search", mode="before")
    @classmethod
    def _clean_search(cls, value: Optional[str]) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("category", mode="before")
    @classmethod
    def _default_category(cls, value: Optional[str]) -> str:
        return value or ALL_CATEGORIES


class MonthGroup(BaseModel):
    month: str
    events: List[Event]


class WishlistView(BaseModel):
    events: List[Event]
    by_month: List[MonthGroup]
    upcoming: List[Event]
    categories: List[str]
    total: int
    matched: int
    filters: WishlistFilters


class WishlistSummary(BaseModel):
    total: int
    featured: int
    this_week: int
    next_events: List[Event]
    remaining: int


class MembershipRead(BaseModel):
    event_id: int
    wishlisted: bool
