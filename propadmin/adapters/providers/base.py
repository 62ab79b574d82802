# propadmin/adapters/providers/base.py
from __future__ import annotations

from typing import Protocol

from ...domain.types import FilterState, ListingPage, PropertyRecord


class ProviderUnavailable(RuntimeError):
    """The backing store could not be reached or answered with an error."""


class ListingProvider(Protocol):
    name: str

    async def list_page(self, state: FilterState) -> ListingPage:
        raise NotImplementedError

    async def get(self, record_id: str) -> PropertyRecord | None:
        raise NotImplementedError

    async def facets(self) -> dict[str, dict[str, int]]:
        raise NotImplementedError
