# propadmin/domain/query.py
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Mapping
from urllib.parse import urlencode

from .parsing import to_enum
from .types import (
    DEFAULT_PAGE_SIZE,
    PRICE_FLOOR,
    FilterState,
    PropertyStatus,
    PropertyType,
    SortField,
    SortOrder,
)

log = logging.getLogger(__name__)

# camelCase spellings sent by the original admin page
_ALIASES = {
    "sortBy": "sort_by",
    "sortDirection": "order",
    "minPrice": "min_price",
    "maxPrice": "max_price",
}


def format_number(x: float | int) -> str:
    """Plain decimal: no grouping separators, no exponent, no trailing '.0'."""
    if isinstance(x, bool):
        x = int(x)
    if isinstance(x, int):
        return str(x)
    if float(x).is_integer():
        return str(int(x))
    return format(Decimal(repr(float(x))), "f")


def _value(x) -> str:
    return x.value if hasattr(x, "value") else str(x)


def encode_query(state: FilterState) -> list[tuple[str, str]]:
    """
    Ordered (key, value) pairs for the list endpoint.

    Keys at their default are left out, except sort_by, order, page and limit
    which are always sent. Nothing is validated here: a negative page goes out
    as-is.
    """
    pairs: list[tuple[str, str]] = []

    search = state.search.strip()
    if search:
        pairs.append(("search", search))

    pairs.append(("sort_by", _value(state.sort_by)))
    pairs.append(("order", _value(state.order)))

    if state.statuses:
        pairs.append(("status", ",".join(_value(s) for s in state.statuses)))
    if state.property_types:
        pairs.append(("type", ",".join(_value(t) for t in state.property_types)))

    if state.min_price > PRICE_FLOOR:
        pairs.append(("min_price", format_number(state.min_price)))
    if state.max_price is not None:
        pairs.append(("max_price", format_number(state.max_price)))

    pairs.append(("page", format_number(state.page)))
    pairs.append(("limit", format_number(state.limit)))
    return pairs


def to_query_string(state: FilterState) -> str:
    return urlencode(encode_query(state))


# -----------------------------
# Parsing (what the list endpoint does with the pairs)
# -----------------------------

def _parse_int(raw: str | None, fallback: int, key: str) -> int:
    if raw is None or raw.strip() == "":
        return fallback
    try:
        return int(float(raw))
    except (ValueError, OverflowError):
        log.debug("query %s=%r is not a number; using %s", key, raw, fallback)
        return fallback


def _parse_float(raw: str | None, fallback: float | None, key: str) -> float | None:
    if raw is None or raw.strip() == "":
        return fallback
    try:
        v = float(raw)
    except ValueError:
        log.debug("query %s=%r is not a number; using %s", key, raw, fallback)
        return fallback
    if v != v or v in (float("inf"), float("-inf")):
        return fallback
    return v


def _parse_set(raw: str | None, enum_cls) -> tuple:
    if not raw:
        return ()
    out: list = []
    for part in raw.split(","):
        member = to_enum(enum_cls, part)
        if member is None:
            if part.strip():
                log.debug("dropping unknown %s value %r", enum_cls.__name__, part)
            continue
        if member not in out:
            out.append(member)
    return tuple(out)


def parse_query(
    params: Mapping[str, str],
    *,
    default_limit: int = DEFAULT_PAGE_SIZE,
    max_limit: int | None = None,
) -> FilterState:
    """
    Build a FilterState from raw query parameters.

    Malformed numbers silently fall back to their defaults. page < 1 becomes 1,
    a non-positive limit becomes `default_limit`, and limit is capped at
    `max_limit` when one is given. Unknown sort fields are kept verbatim.
    """
    p: dict[str, str] = {}
    for k, v in params.items():
        p[_ALIASES.get(k, k)] = v

    sort_raw = (p.get("sort_by") or "").strip()
    if not sort_raw:
        sort_by: SortField | str = SortField.last_updated
    else:
        sort_by = to_enum(SortField, sort_raw) or sort_raw

    order = to_enum(SortOrder, p.get("order")) or SortOrder.desc

    page = _parse_int(p.get("page"), 1, "page")
    if page < 1:
        page = 1

    limit = _parse_int(p.get("limit"), default_limit, "limit")
    if limit < 1:
        limit = default_limit
    if max_limit is not None and limit > max_limit:
        limit = max_limit

    min_price = _parse_float(p.get("min_price"), PRICE_FLOOR, "min_price")
    max_price = _parse_float(p.get("max_price"), None, "max_price")

    return FilterState(
        search=(p.get("search") or "").strip(),
        sort_by=sort_by,
        order=order,
        statuses=_parse_set(p.get("status"), PropertyStatus),
        property_types=_parse_set(p.get("type"), PropertyType),
        min_price=min_price if min_price is not None else PRICE_FLOOR,
        max_price=max_price,
        page=page,
        limit=limit,
    )
