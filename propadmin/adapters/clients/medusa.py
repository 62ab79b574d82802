# propadmin/adapters/clients/medusa.py
from __future__ import annotations

import logging
from typing import Any

import httpx

from ...config import settings
from ...domain.query import encode_query
from ...domain.types import FilterState
from .http_resilience import resilient_request

log = logging.getLogger(__name__)


class MedusaConnector:
    """
    Low-level HTTP client for the commerce backend's property list route.
    Returns decoded JSON, not PropertyRecord.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        api_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or settings.MEDUSA_BASE_URL or "").rstrip("/")
        self._api_key = api_key if api_key is not None else settings.MEDUSA_API_KEY
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"accept": "application/json"}
        if self._api_key:
            headers["x-medusa-access-token"] = self._api_key
        return headers

    def _build_url(self, path: str) -> str:
        if not self._base_url:
            raise ValueError("MEDUSA_BASE_URL is not set")
        return f"{self._base_url}/{path.lstrip('/')}"

    async def fetch_properties(self, state: FilterState) -> Any:
        url = self._build_url("/properties")
        params = encode_query(state)
        log.debug("medusa GET %s params=%s", url, params)
        resp = await resilient_request("GET", url, headers=self._headers(), params=params, transport=self._transport)
        return resp.json()

    async def fetch_property(self, record_id: str) -> Any | None:
        url = self._build_url(f"/properties/{record_id}")
        try:
            resp = await resilient_request("GET", url, headers=self._headers(), transport=self._transport)
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            raise
        return resp.json()
