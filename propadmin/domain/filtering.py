# propadmin/domain/filtering.py
from __future__ import annotations

from typing import Iterable

from .types import PRICE_FLOOR, FilterState, PropertyRecord


def price_clause_active(state: FilterState) -> bool:
    return state.min_price > PRICE_FLOOR or state.max_price is not None


def matches_search(record: PropertyRecord, needle: str) -> bool:
    if not needle:
        return True
    haystacks = (record.name, record.location)
    return any(h is not None and needle in h.lower() for h in haystacks)


def matches(record: PropertyRecord, state: FilterState, *, needle: str | None = None) -> bool:
    """AND of every active clause. A missing field never satisfies an active clause."""
    if needle is None:
        needle = state.search.strip().lower()

    if not matches_search(record, needle):
        return False

    if state.statuses and record.status not in state.statuses:
        return False

    if state.property_types and record.property_type not in state.property_types:
        return False

    if price_clause_active(state):
        if record.price is None:
            return False
        if record.price < state.min_price:
            return False
        if state.max_price is not None and record.price > state.max_price:
            return False

    return True


def filter_records(records: Iterable[PropertyRecord], state: FilterState) -> list[PropertyRecord]:
    needle = state.search.strip().lower()
    return [r for r in records if matches(r, state, needle=needle)]
