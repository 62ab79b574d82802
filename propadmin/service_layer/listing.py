# propadmin/service_layer/listing.py
from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from ..domain.filtering import filter_records
from ..domain.pagination import paginate
from ..domain.sorting import sort_records
from ..domain.types import (
    FilterState,
    ListingPage,
    PropertyRecord,
    PropertyStatus,
    PropertyType,
)


def list_properties(records: Sequence[PropertyRecord], state: FilterState) -> ListingPage:
    """
    filter -> sort -> paginate, always in that order, so page boundaries are
    computed over matching records only. The requested page is echoed back
    unchanged even when it is out of range.
    """
    matching = filter_records(records, state)
    ordered = sort_records(matching, state.sort_by, state.order)
    data, total, pages = paginate(ordered, state.page, state.limit)
    return ListingPage(data=data, total=total, page=state.page, total_pages=pages)


def count_facets(records: Iterable[PropertyRecord]) -> dict[str, dict[str, int]]:
    """Per-value counts for the filter panel. Every enum member is present, even at 0."""
    status_counts: Counter[str] = Counter()
    type_counts: Counter[str] = Counter()
    for r in records:
        if r.status is not None:
            status_counts[r.status.value] += 1
        if r.property_type is not None:
            type_counts[r.property_type.value] += 1

    return {
        "status": {s.value: status_counts.get(s.value, 0) for s in PropertyStatus},
        "type": {t.value: type_counts.get(t.value, 0) for t in PropertyType},
    }
