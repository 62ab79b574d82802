# propadmin/entrypoints/api/deps.py
from __future__ import annotations

from fastapi import Depends, Header, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ...adapters.providers.base import ListingProvider
from ...adapters.providers.factory import get_provider
from ...config import settings
from ...db import get_session


def require_api_key(x_api_key: str | None = Header(default=None, alias="X-API-Key")) -> None:
    if settings.API_KEY:
        if not x_api_key or x_api_key != settings.API_KEY:
            raise HTTPException(status_code=401, detail="Invalid API key")


async def provider_dep(session: AsyncSession = Depends(get_session)) -> ListingProvider:
    return get_provider(session)
