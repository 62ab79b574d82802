# propadmin/domain/types.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum


class PropertyStatus(str, Enum):
    active = "active"
    archived = "archived"
    reject = "reject"
    draft = "draft"


class PropertyType(str, Enum):
    house = "house"
    villa = "villa"
    apartment = "apartment"
    building = "building"


class SortField(str, Enum):
    price = "price"
    rating = "rating"
    last_updated = "last_updated"


class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"


DEFAULT_PAGE_SIZE = 10
PRICE_FLOOR = 0.0


@dataclass(frozen=True)
class PropertyRecord:
    """
    One property listing as the admin list sees it.

    Everything except `id` may be missing when the backing store omits it;
    filters and sorts treat a missing field as "does not match".
    """

    id: str
    name: str | None = None
    province: str | None = None
    country: str | None = None
    property_type: PropertyType | None = None
    status: PropertyStatus | None = None
    price: float | None = None
    rating: float | None = None
    bedroom: int | None = None
    bathroom: int | None = None
    last_updated: datetime | None = None
    image: str | None = None
    description: str | None = None

    @property
    def location(self) -> str | None:
        parts = [p for p in (self.province, self.country) if p]
        return ", ".join(parts) if parts else None


@dataclass(frozen=True)
class FilterState:
    search: str = ""
    sort_by: SortField | str = SortField.last_updated
    order: SortOrder = SortOrder.desc
    statuses: tuple[PropertyStatus, ...] = field(default_factory=tuple)
    property_types: tuple[PropertyType, ...] = field(default_factory=tuple)
    min_price: float = PRICE_FLOOR
    max_price: float | None = None
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    # --- immutable updates (each returns a new state) ---

    def with_filter(self, **changes) -> "FilterState":
        """Change any filter field; a new filter always starts again at page 1."""
        changes["page"] = 1
        return replace(self, **changes)

    def toggle(self, field_name: str, value) -> "FilterState":
        if field_name not in ("statuses", "property_types"):
            raise ValueError(f"not a multi-valued filter: {field_name}")
        current: tuple = getattr(self, field_name)
        if value in current:
            updated = tuple(v for v in current if v != value)
        else:
            updated = current + (value,)
        return self.with_filter(**{field_name: updated})

    def toggle_order(self) -> "FilterState":
        flipped = SortOrder.desc if self.order == SortOrder.asc else SortOrder.asc
        return replace(self, order=flipped)

    def with_page(self, page: int) -> "FilterState":
        return replace(self, page=page)

    def cleared(self) -> "FilterState":
        return FilterState(limit=self.limit)

    @property
    def active_filter_count(self) -> int:
        n = len(self.statuses) + len(self.property_types)
        if self.min_price > PRICE_FLOOR:
            n += 1
        if self.max_price is not None:
            n += 1
        return n


@dataclass(frozen=True)
class ListingPage:
    data: list[PropertyRecord]
    total: int
    page: int
    total_pages: int
