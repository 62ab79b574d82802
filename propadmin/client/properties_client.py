# propadmin/client/properties_client.py
from __future__ import annotations

import logging

import httpx

from ..config import settings
from ..domain.parsing import page_from_payload
from ..domain.query import encode_query
from ..domain.types import FilterState, ListingPage

log = logging.getLogger(__name__)


class FetchFailed(RuntimeError):
    """The list endpoint was unreachable, answered non-2xx, or sent an unreadable body."""


class PropertiesClient:
    """
    Calls GET /properties on a property-admin server. One request per call,
    no retries: a failure is reported to the caller as FetchFailed.
    """

    def __init__(
        self,
        base_url: str,
        *,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = httpx.Timeout(float(timeout if timeout is not None else settings.HTTP_TIMEOUT_S))
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"accept": "application/json"}
        if self._api_key:
            headers["X-API-Key"] = self._api_key
        return headers

    async def fetch(self, state: FilterState) -> ListingPage:
        url = f"{self._base_url}/properties"
        params = encode_query(state)
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                r = await client.get(url, params=params, headers=self._headers())
                r.raise_for_status()
                payload = r.json()
            return page_from_payload(payload, page=state.page, limit=state.limit)
        except httpx.HTTPStatusError as e:
            raise FetchFailed(f"GET {url} -> {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise FetchFailed(f"GET {url} failed: {e!r}") from e
