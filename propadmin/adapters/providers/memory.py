# propadmin/adapters/providers/memory.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ...config import settings
from ...domain.parsing import record_from_payload
from ...domain.types import FilterState, ListingPage, PropertyRecord
from ...service_layer.demo_seed import DEMO_PROPERTIES
from ...service_layer.listing import count_facets, list_properties

log = logging.getLogger(__name__)


def as_list_of_dicts(payload: Any) -> list[dict[str, Any]]:
    """
    Accept either:
      - list[dict]
      - {"data": list[dict]} (the list endpoint's own response shape)
    """
    if isinstance(payload, list):
        return [x for x in payload if isinstance(x, dict)]
    if isinstance(payload, dict):
        v = payload.get("data")
        if isinstance(v, list):
            return [x for x in v if isinstance(x, dict)]
    return []


def records_from_payloads(items: list[dict[str, Any]]) -> list[PropertyRecord]:
    out: list[PropertyRecord] = []
    seen: set[str] = set()
    for it in items:
        try:
            rec = record_from_payload(it)
        except ValueError as e:
            log.warning("skipping fixture row: %s", e)
            continue
        if rec.id in seen:
            log.warning("skipping duplicate fixture id %s", rec.id)
            continue
        seen.add(rec.id)
        out.append(rec)
    return out


@dataclass
class InMemoryListingProvider:
    """
    Serves a fixed snapshot of records through the pure filter/sort/paginate
    pipeline. Used for development and as the mock backend.
    """

    records: list[PropertyRecord] = field(default_factory=list)
    name: str = "memory"

    @classmethod
    def from_payloads(cls, items: list[dict[str, Any]]) -> "InMemoryListingProvider":
        return cls(records=records_from_payloads(items))

    @classmethod
    def from_file(cls, path: Path) -> "InMemoryListingProvider":
        raw = json.loads(path.read_text(encoding="utf-8"))
        return cls.from_payloads(as_list_of_dicts(raw))

    @classmethod
    def from_settings(cls) -> "InMemoryListingProvider":
        if settings.FIXTURE_PATH:
            return cls.from_file(Path(settings.FIXTURE_PATH))
        return cls.from_payloads(DEMO_PROPERTIES)

    async def list_page(self, state: FilterState) -> ListingPage:
        return list_properties(self.records, state)

    async def get(self, record_id: str) -> PropertyRecord | None:
        for r in self.records:
            if r.id == record_id:
                return r
        return None

    async def facets(self) -> dict[str, dict[str, int]]:
        return count_facets(self.records)
