# propadmin/adapters/repos/properties.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import and_, case, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ...domain.filtering import price_clause_active
from ...domain.parsing import record_from_payload
from ...domain.types import FilterState, PropertyRecord, SortField, SortOrder
from ...models import Property

_SORT_COLUMNS = {
    SortField.price: Property.price,
    SortField.rating: Property.rating,
    SortField.last_updated: Property.last_updated,
}


def _naive_utc(dt: datetime | None) -> datetime | None:
    if dt is None or dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def _location_expr():
    # "province, country" when both are present, otherwise whichever one is
    return case(
        (
            and_(Property.province.isnot(None), Property.country.isnot(None)),
            Property.province + ", " + Property.country,
        ),
        else_=func.coalesce(Property.province, Property.country),
    )


def build_conditions(state: FilterState) -> list[Any]:
    conds: list[Any] = []

    needle = state.search.strip().lower()
    if needle:
        conds.append(
            or_(
                func.lower(Property.name).contains(needle, autoescape=True),
                func.lower(_location_expr()).contains(needle, autoescape=True),
            )
        )

    if state.statuses:
        conds.append(Property.status.in_(list(state.statuses)))

    if state.property_types:
        conds.append(Property.property_type.in_(list(state.property_types)))

    if price_clause_active(state):
        conds.append(Property.price.isnot(None))
        conds.append(Property.price >= state.min_price)
        if state.max_price is not None:
            conds.append(Property.price <= state.max_price)

    return conds


def build_order_by(sort_by: SortField | str, order: SortOrder) -> list[Any]:
    try:
        col = _SORT_COLUMNS[SortField(sort_by)]
    except ValueError:
        # unknown field: keep storage order
        return [Property.pk.asc()]

    direction = col.desc() if order == SortOrder.desc else col.asc()
    # nulls last in both directions, ties by insertion order
    return [col.is_(None).asc(), direction, Property.pk.asc()]


class PropertyRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def upsert_from_payload(self, payload: dict[str, Any]) -> Property:
        """
        Upsert keyed on the listing id. Raises ValueError when the payload has none.
        """
        return await self.upsert_record(record_from_payload(payload))

    async def upsert_record(self, record: PropertyRecord) -> Property:
        q = select(Property).where(Property.id == record.id)
        row = (await self.session.execute(q)).scalars().first()

        if row is None:
            row = Property(id=record.id)
            self.session.add(row)

        row.name = record.name
        row.province = record.province
        row.country = record.country
        row.property_type = record.property_type
        row.status = record.status
        row.price = record.price
        row.rating = record.rating
        row.bedroom = record.bedroom
        row.bathroom = record.bathroom
        row.last_updated = _naive_utc(record.last_updated)
        row.image = record.image
        row.description = record.description

        await self.session.flush()
        return row

    async def get(self, record_id: str) -> Property | None:
        q = select(Property).where(Property.id == record_id)
        return (await self.session.execute(q)).scalars().first()

    async def count(self, state: FilterState | None = None) -> int:
        q = select(func.count()).select_from(Property)
        if state is not None:
            q = q.where(*build_conditions(state))
        return int((await self.session.execute(q)).scalar_one())

    async def search(self, state: FilterState, *, offset: int, limit: int) -> list[Property]:
        q = (
            select(Property)
            .where(*build_conditions(state))
            .order_by(*build_order_by(state.sort_by, state.order))
            .offset(offset)
            .limit(limit)
        )
        return list((await self.session.execute(q)).scalars().all())

    async def facet_counts(self) -> tuple[dict[str, int], dict[str, int]]:
        status_rows = (
            await self.session.execute(
                select(Property.status, func.count()).where(Property.status.isnot(None)).group_by(Property.status)
            )
        ).all()
        type_rows = (
            await self.session.execute(
                select(Property.property_type, func.count())
                .where(Property.property_type.isnot(None))
                .group_by(Property.property_type)
            )
        ).all()
        return (
            {s.value: int(n) for s, n in status_rows},
            {t.value: int(n) for t, n in type_rows},
        )
