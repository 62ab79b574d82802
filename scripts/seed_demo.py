# scripts/seed_demo.py
from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path

from propadmin.adapters.providers.memory import as_list_of_dicts
from propadmin.db import async_session, engine
from propadmin.models import Base
from propadmin.service_layer.demo_seed import seed_demo


async def _ensure_schema() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def main() -> None:
    parser = argparse.ArgumentParser(description="Load property listings into the database (upsert by id).")
    parser.add_argument("--file", type=Path, default=None, help="JSON fixture to load instead of the built-in demo set")
    parser.add_argument("--schema-only", action="store_true", help="Create the tables and stop")
    args = parser.parse_args()

    items = None
    if args.file is not None:
        items = as_list_of_dicts(json.loads(args.file.read_text(encoding="utf-8")))

    await _ensure_schema()
    if args.schema_only:
        print("OK: created all tables (idempotent).")
        return

    async with async_session() as session:
        result = await seed_demo(session, items)
        await session.commit()

    print(f"Seeded properties: {result['seeded']}")


if __name__ == "__main__":
    asyncio.run(main())
