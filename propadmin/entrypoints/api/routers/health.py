# propadmin/entrypoints/api/routers/health.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request

from ..deps import require_api_key
from ....config import settings
from ....schemas import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health() -> HealthOut:
    return HealthOut(status="ok", provider=settings.LISTING_PROVIDER)


@router.get("/debug/config", dependencies=[Depends(require_api_key)])
def debug_config() -> dict[str, Any]:
    def _redact(v: str | None) -> str | None:
        if not v:
            return v
        if len(v) <= 8:
            return "***"
        return v[:4] + "***" + v[-4:]

    return {
        "ENV": settings.ENV,
        "LISTING_PROVIDER": settings.LISTING_PROVIDER,
        "PROPADMIN_DB_URL": settings.PROPADMIN_DB_URL,
        "FIXTURE_PATH": settings.FIXTURE_PATH,
        "MEDUSA_BASE_URL": settings.MEDUSA_BASE_URL,
        "MEDUSA_API_KEY": _redact(settings.MEDUSA_API_KEY),
        "DEFAULT_PAGE_SIZE": settings.DEFAULT_PAGE_SIZE,
        "MAX_PAGE_SIZE": settings.MAX_PAGE_SIZE,
    }


@router.get("/debug/routes", dependencies=[Depends(require_api_key)])
def debug_routes(request: Request) -> dict[str, Any]:
    """
    Lists the routes this running server exposes in its OpenAPI schema.
    """
    routes: list[str] = []
    for path, operations in request.app.openapi().get("paths", {}).items():
        methods = sorted(m.upper() for m in operations)
        routes.append(f"{methods} {path}")
    return {"count": len(routes), "routes": sorted(routes)}
