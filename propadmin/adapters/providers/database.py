# propadmin/adapters/providers/database.py
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ...domain.pagination import total_pages
from ...domain.types import FilterState, ListingPage, PropertyRecord, PropertyStatus, PropertyType
from ..repos.properties import PropertyRepository


class DatabaseListingProvider:
    """
    Same semantics as the in-memory pipeline, pushed down into SQL.

    Differences worth knowing: SQLite's lower() only folds ASCII, and ties
    are broken by insertion order rather than by the caller's input order.
    """

    name = "database"

    def __init__(self, session: AsyncSession):
        self.repo = PropertyRepository(session)

    async def list_page(self, state: FilterState) -> ListingPage:
        total = await self.repo.count(state)
        pages = total_pages(total, state.limit)

        if state.page < 1 or state.page > pages:
            return ListingPage(data=[], total=total, page=state.page, total_pages=pages)

        rows = await self.repo.search(state, offset=(state.page - 1) * state.limit, limit=state.limit)
        return ListingPage(
            data=[r.to_record() for r in rows],
            total=total,
            page=state.page,
            total_pages=pages,
        )

    async def get(self, record_id: str) -> PropertyRecord | None:
        row = await self.repo.get(record_id)
        return row.to_record() if row else None

    async def facets(self) -> dict[str, dict[str, int]]:
        status_counts, type_counts = await self.repo.facet_counts()
        return {
            "status": {s.value: status_counts.get(s.value, 0) for s in PropertyStatus},
            "type": {t.value: type_counts.get(t.value, 0) for t in PropertyType},
        }
