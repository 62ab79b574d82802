# propadmin/domain/sorting.py
from __future__ import annotations

from typing import Any, Callable, Sequence

from .types import PropertyRecord, SortField, SortOrder

_KEYS: dict[SortField, Callable[[PropertyRecord], Any]] = {
    SortField.price: lambda r: r.price,
    SortField.rating: lambda r: r.rating,
    SortField.last_updated: lambda r: r.last_updated,
}


def sort_key_for(field: SortField | str) -> Callable[[PropertyRecord], Any] | None:
    try:
        return _KEYS[SortField(field)]
    except ValueError:
        return None


def sort_records(
    records: Sequence[PropertyRecord],
    sort_by: SortField | str,
    order: SortOrder | str = SortOrder.desc,
) -> list[PropertyRecord]:
    """
    Stable sort by price, rating or last_updated.

    Records without a value for the key go last in either direction, in their
    incoming order. An unrecognised field leaves the order untouched.
    """
    key = sort_key_for(sort_by)
    if key is None:
        return list(records)

    keyed = [r for r in records if key(r) is not None]
    missing = [r for r in records if key(r) is None]

    # sorted() is stable for reverse=True as well: ties keep their input order
    descending = SortOrder(order) == SortOrder.desc
    return sorted(keyed, key=key, reverse=descending) + missing
