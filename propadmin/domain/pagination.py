# propadmin/domain/pagination.py
from __future__ import annotations

import math
from typing import Sequence, TypeVar

T = TypeVar("T")


def total_pages(total: int, limit: int) -> int:
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")
    return math.ceil(total / limit)


def paginate(items: Sequence[T], page: int, limit: int) -> tuple[list[T], int, int]:
    """
    Returns (slice, total, total_pages) for a 1-based page.

    Out-of-range pages (below 1 or past the last page) give an empty slice;
    clamping is left to the caller.
    """
    total = len(items)
    pages = total_pages(total, limit)
    if page < 1 or page > pages:
        return [], total, pages
    start = (page - 1) * limit
    return list(items[start : start + limit]), total, pages
