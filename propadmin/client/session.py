# propadmin/client/session.py
from __future__ import annotations

import logging
from typing import Protocol

from ..domain.types import (
    FilterState,
    ListingPage,
    PropertyRecord,
    PropertyStatus,
    PropertyType,
    SortField,
)
from .properties_client import FetchFailed

log = logging.getLogger(__name__)


class PageFetcher(Protocol):
    async def fetch(self, state: FilterState) -> ListingPage: ...


class ListingSession:
    """
    The admin list's view state: the current FilterState plus whatever page is
    on screen.

    Every mutation builds a new FilterState and re-fetches. Requests are
    numbered; only the response to the most recently issued request is
    applied, so a slow earlier response can never overwrite a newer one.
    A failed fetch clears the page and sets `error`; nothing is retried until
    the next mutation or an explicit refresh().
    """

    def __init__(self, fetcher: PageFetcher, state: FilterState | None = None) -> None:
        self.fetcher = fetcher
        self.state = state or FilterState()

        self.records: list[PropertyRecord] = []
        self.total = 0
        self.total_pages = 0
        self.loading = False
        self.error: str | None = None

        self._issued = 0

    @property
    def latest_request(self) -> int:
        return self._issued

    async def refresh(self) -> bool:
        """Fetch for the current state. Returns False when the response was superseded."""
        self._issued += 1
        seq = self._issued
        state = self.state
        self.loading = True

        try:
            page = await self.fetcher.fetch(state)
        except FetchFailed as e:
            if seq != self._issued:
                log.debug("discarding failure of superseded request #%d", seq)
                return False
            log.warning("fetch #%d failed: %s", seq, e)
            self.records = []
            self.total = 0
            self.total_pages = 0
            self.error = str(e)
            self.loading = False
            return True

        if seq != self._issued:
            log.debug("discarding stale response #%d (latest #%d)", seq, self._issued)
            return False

        self.records = list(page.data)
        self.total = page.total
        self.total_pages = page.total_pages
        self.error = None
        self.loading = False
        return True

    async def _apply(self, state: FilterState) -> bool:
        self.state = state
        return await self.refresh()

    # --- filters (each resets to page 1) ---

    async def set_search(self, text: str) -> bool:
        return await self._apply(self.state.with_filter(search=text))

    async def set_sort(self, field: SortField | str) -> bool:
        return await self._apply(self.state.with_filter(sort_by=field))

    async def toggle_status(self, status: PropertyStatus) -> bool:
        return await self._apply(self.state.toggle("statuses", status))

    async def toggle_type(self, property_type: PropertyType) -> bool:
        return await self._apply(self.state.toggle("property_types", property_type))

    async def set_price_range(self, min_price: float | None = None, max_price: float | None = None) -> bool:
        return await self._apply(
            self.state.with_filter(
                min_price=min_price if min_price is not None else 0.0,
                max_price=max_price,
            )
        )

    async def clear(self) -> bool:
        return await self._apply(self.state.cleared())

    # --- ordering / paging (keep the current filters) ---

    async def toggle_order(self) -> bool:
        return await self._apply(self.state.toggle_order())

    @property
    def last_page(self) -> int:
        return max(1, self.total_pages)

    @property
    def has_previous(self) -> bool:
        return self.state.page > 1

    @property
    def has_next(self) -> bool:
        return self.state.page < self.total_pages

    async def go_to_page(self, page: int) -> bool:
        clamped = min(max(1, page), self.last_page)
        return await self._apply(self.state.with_page(clamped))

    async def next_page(self) -> bool:
        if not self.has_next:
            return False
        return await self.go_to_page(self.state.page + 1)

    async def previous_page(self) -> bool:
        if not self.has_previous:
            return False
        return await self.go_to_page(self.state.page - 1)

    @property
    def status_line(self) -> str:
        if self.loading:
            return "Loading properties..."
        if self.error:
            return "Could not load properties"
        if not self.records:
            return "No properties found"
        return f"Showing {len(self.records)} properties"
