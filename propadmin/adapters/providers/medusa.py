# propadmin/adapters/providers/medusa.py
from __future__ import annotations

import logging

import httpx

from ...domain.parsing import page_from_payload, record_from_payload
from ...domain.types import FilterState, ListingPage, PropertyRecord, PropertyStatus, PropertyType
from ..clients.medusa import MedusaConnector
from .base import ProviderUnavailable

log = logging.getLogger(__name__)


class MedusaListingProvider:
    """
    Forwards the filter state to the commerce backend's list route. Filtering,
    sorting and paging happen remotely.
    """

    name = "medusa"

    def __init__(self, connector: MedusaConnector | None = None):
        self.connector = connector or MedusaConnector()

    async def list_page(self, state: FilterState) -> ListingPage:
        try:
            payload = await self.connector.fetch_properties(state)
            return page_from_payload(payload, page=state.page, limit=state.limit)
        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers a missing base URL and an undecodable or non-object body
            log.warning("medusa list failed: %r", e)
            raise ProviderUnavailable(f"medusa list failed: {e}") from e

    async def get(self, record_id: str) -> PropertyRecord | None:
        try:
            payload = await self.connector.fetch_property(record_id)
        except (httpx.HTTPError, ValueError) as e:
            log.warning("medusa get %s failed: %r", record_id, e)
            raise ProviderUnavailable(f"medusa get failed: {e}") from e

        if payload is None:
            return None
        if isinstance(payload, dict) and isinstance(payload.get("property"), dict):
            payload = payload["property"]
        if not isinstance(payload, dict):
            raise ProviderUnavailable(f"unexpected response body: {type(payload).__name__}")
        try:
            return record_from_payload(payload)
        except ValueError as e:
            raise ProviderUnavailable(str(e)) from e

    async def facets(self) -> dict[str, dict[str, int]]:
        """
        The remote list route has no facet endpoint, so each count is one
        limit=1 list call filtered to a single value.
        """
        out: dict[str, dict[str, int]] = {"status": {}, "type": {}}
        for s in PropertyStatus:
            page = await self.list_page(FilterState(statuses=(s,), limit=1))
            out["status"][s.value] = page.total
        for t in PropertyType:
            page = await self.list_page(FilterState(property_types=(t,), limit=1))
            out["type"][t.value] = page.total
        return out
