# propadmin/entrypoints/fastapi_app.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..adapters.providers.base import ProviderUnavailable
from ..adapters.providers.factory import validate_provider_name
from ..config import settings
from ..db import AsyncSessionLocal, engine
from ..models import Base
from ..service_layer.demo_seed import seed_demo
from .api.routers import health, properties

log = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app() -> FastAPI:
    configure_logging()
    provider_name = validate_provider_name(settings.LISTING_PROVIDER)

    app = FastAPI(title="Property Admin - Listings")

    @app.on_event("startup")
    async def _startup() -> None:
        # Single place where DB tables are created in dev.
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        if provider_name == "database" and settings.SEED_DEMO_DATA:
            async with AsyncSessionLocal() as session:
                result = await seed_demo(session)
                await session.commit()
            log.info("seeded demo properties: %s", result)

        log.info("listing provider: %s", provider_name)

    @app.exception_handler(ProviderUnavailable)
    async def _provider_unavailable(request: Request, exc: ProviderUnavailable) -> JSONResponse:
        log.warning("%s %s -> 502: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    # Routers
    app.include_router(health.router)
    app.include_router(properties.router)

    return app
