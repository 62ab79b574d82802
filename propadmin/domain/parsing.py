# propadmin/domain/parsing.py
from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Any

from .types import ListingPage, PropertyRecord, PropertyStatus, PropertyType

log = logging.getLogger(__name__)


def to_int(x: Any) -> int | None:
    if x is None or x == "":
        return None
    try:
        return int(float(x))
    except (TypeError, ValueError, OverflowError):
        return None


def to_float(x: Any) -> float | None:
    if x is None or x == "":
        return None
    try:
        v = float(x)
    except (TypeError, ValueError):
        return None
    if v != v:  # NaN
        return None
    return v


def to_str(x: Any) -> str | None:
    if x is None:
        return None
    s = str(x).strip()
    return s if s else None


def to_datetime(x: Any) -> datetime | None:
    """
    Accepts datetimes, ISO-8601 strings (with or without a trailing 'Z') and
    epoch seconds. Naive values are read as UTC.
    """
    if x is None or x == "":
        return None

    if isinstance(x, datetime):
        dt = x
    elif isinstance(x, (int, float)) and not isinstance(x, bool):
        try:
            return datetime.fromtimestamp(float(x), tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    else:
        s = str(x).strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(s)
        except ValueError:
            return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_enum(enum_cls, x: Any):
    if x is None:
        return None
    if isinstance(x, enum_cls):
        return x
    try:
        return enum_cls(str(x).strip().lower())
    except ValueError:
        return None


def get_first(payload: dict[str, Any], *keys: str) -> Any:
    """Return first non-empty key from payload."""
    for k in keys:
        v = payload.get(k)
        if v is None:
            continue
        if isinstance(v, str) and not v.strip():
            continue
        return v
    return None


def get_nested(payload: dict[str, Any], path: str) -> Any:
    """Tiny dot-path getter: 'location.province'."""
    cur: Any = payload
    for part in path.split("."):
        if not isinstance(cur, dict):
            return None
        cur = cur.get(part)
        if cur is None:
            return None
    return cur


def record_from_payload(payload: dict[str, Any]) -> PropertyRecord:
    """
    Canonicalize a raw listing payload (fixture row, DB row dict or backend JSON)
    into a PropertyRecord.

    Keys vary between the fixture format and what the commerce backend returns
    (camelCase, nested `location`), so several spellings are accepted.
    Raises ValueError when there is no usable id.
    """
    record_id = to_str(get_first(payload, "id", "property_id", "propertyId"))
    if record_id is None:
        raise ValueError(f"listing payload has no id: keys={sorted(payload)}")

    price = to_float(get_first(payload, "price", "listPrice"))
    if price is not None and price < 0:
        price = None

    return PropertyRecord(
        id=record_id,
        name=to_str(get_first(payload, "name", "title")),
        province=to_str(get_first(payload, "province") or get_nested(payload, "location.province")),
        country=to_str(get_first(payload, "country") or get_nested(payload, "location.country")),
        property_type=to_enum(PropertyType, get_first(payload, "type", "property_type", "propertyType")),
        status=to_enum(PropertyStatus, payload.get("status")),
        price=price,
        rating=to_float(payload.get("rating")),
        bedroom=to_int(get_first(payload, "bedroom", "bedrooms", "beds")),
        bathroom=to_int(get_first(payload, "bathroom", "bathrooms", "baths")),
        last_updated=to_datetime(get_first(payload, "last_updated", "lastUpdated", "updated_at", "updatedAt")),
        image=to_str(get_first(payload, "image", "thumbnail")),
        description=to_str(payload.get("description")),
    )


def record_to_payload(record: PropertyRecord) -> dict[str, Any]:
    """Inverse of record_from_payload, using the list API's key names."""
    return {
        "id": record.id,
        "name": record.name,
        "province": record.province,
        "country": record.country,
        "type": record.property_type.value if record.property_type else None,
        "status": record.status.value if record.status else None,
        "price": record.price,
        "rating": record.rating,
        "bedroom": record.bedroom,
        "bathroom": record.bathroom,
        "last_updated": record.last_updated.isoformat() if record.last_updated else None,
        "image": record.image,
        "description": record.description,
    }


def page_from_payload(payload: Any, *, page: int, limit: int) -> ListingPage:
    """
    Decode a list response. Accepts the list route's own shape
    ({data, total, page, totalPages}) and the Medusa-style {properties, count}.
    Rows that cannot be canonicalized are skipped; a non-object body raises
    ValueError.
    """
    if not isinstance(payload, dict):
        raise ValueError(f"unexpected response body: {type(payload).__name__}")

    rows: list[dict[str, Any]] = []
    for key in ("data", "properties"):
        v = payload.get(key)
        if isinstance(v, list):
            rows = [x for x in v if isinstance(x, dict)]
            break

    records: list[PropertyRecord] = []
    for row in rows:
        try:
            records.append(record_from_payload(row))
        except ValueError as e:
            log.warning("skipping property row: %s", e)

    total = to_int(payload.get("total"))
    if total is None:
        total = to_int(payload.get("count"))
    if total is None:
        total = len(records)

    pages = to_int(payload.get("totalPages"))
    if pages is None:
        pages = math.ceil(total / limit) if limit > 0 else 0

    echoed = to_int(payload.get("page"))
    return ListingPage(
        data=records,
        total=total,
        page=echoed if echoed is not None else page,
        total_pages=pages,
    )
