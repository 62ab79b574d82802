# scripts/browse_properties.py
from __future__ import annotations

import argparse
import asyncio
import sys

from propadmin.client.properties_client import PropertiesClient
from propadmin.client.session import ListingSession
from propadmin.config import settings
from propadmin.domain.types import FilterState, PropertyRecord, PropertyStatus, PropertyType, SortField, SortOrder


def _row(r: PropertyRecord) -> str:
    updated = r.last_updated.date().isoformat() if r.last_updated else "Unknown"
    price = f"${r.price:g}" if r.price is not None else "$0"
    status = r.status.value if r.status else "unknown"
    return f"{r.id:<10} {(r.name or '')[:32]:<32} {(r.location or '')[:30]:<30} {price:>8} {status:<9} {updated}"


async def main() -> int:
    parser = argparse.ArgumentParser(description="Print one page of properties from a running server.")
    parser.add_argument("--url", default="http://localhost:8000")
    parser.add_argument("--search", default="")
    parser.add_argument("--sort-by", default=SortField.last_updated.value, choices=[f.value for f in SortField])
    parser.add_argument("--order", default=SortOrder.desc.value, choices=[o.value for o in SortOrder])
    parser.add_argument("--status", action="append", default=[], choices=[s.value for s in PropertyStatus])
    parser.add_argument("--type", action="append", default=[], choices=[t.value for t in PropertyType])
    parser.add_argument("--min-price", type=float, default=0.0)
    parser.add_argument("--max-price", type=float, default=None)
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--limit", type=int, default=settings.DEFAULT_PAGE_SIZE)
    args = parser.parse_args()

    state = FilterState(
        search=args.search,
        sort_by=SortField(args.sort_by),
        order=SortOrder(args.order),
        statuses=tuple(PropertyStatus(s) for s in args.status),
        property_types=tuple(PropertyType(t) for t in args.type),
        min_price=args.min_price,
        max_price=args.max_price,
        page=args.page,
        limit=args.limit,
    )

    session = ListingSession(PropertiesClient(args.url, api_key=settings.API_KEY), state)
    await session.refresh()

    print(session.status_line)
    if session.error:
        print(session.error, file=sys.stderr)
        return 1
    for r in session.records:
        print(_row(r))
    print(f"Page {session.state.page} of {session.last_page} ({session.total} matching)")
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
