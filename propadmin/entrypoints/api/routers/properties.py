# propadmin/entrypoints/api/routers/properties.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from ..deps import provider_dep, require_api_key
from ....adapters.providers.base import ListingProvider
from ....config import settings
from ....domain.query import parse_query
from ....schemas import FacetsOut, PropertyOut, PropertyPageOut

log = logging.getLogger(__name__)

router = APIRouter(tags=["properties"], dependencies=[Depends(require_api_key)])


@router.get("/properties", response_model=PropertyPageOut)
async def list_properties(
    request: Request,
    provider: ListingProvider = Depends(provider_dep),
) -> PropertyPageOut:
    """
    search, sort_by, order, status, type, min_price, max_price, page, limit.

    Parameters are read leniently: anything malformed falls back to its
    default instead of producing a 422.
    """
    state = parse_query(
        request.query_params,
        default_limit=settings.DEFAULT_PAGE_SIZE,
        max_limit=settings.MAX_PAGE_SIZE,
    )
    page = await provider.list_page(state)
    log.debug(
        "properties provider=%s page=%d/%d total=%d",
        provider.name, page.page, page.total_pages, page.total,
    )
    return PropertyPageOut.from_page(page)


@router.get("/properties/facets", response_model=FacetsOut)
async def property_facets(provider: ListingProvider = Depends(provider_dep)) -> FacetsOut:
    return FacetsOut(**(await provider.facets()))


@router.get("/properties/{property_id}", response_model=PropertyOut)
async def get_property(
    property_id: str,
    provider: ListingProvider = Depends(provider_dep),
) -> PropertyOut:
    rec = await provider.get(property_id)
    if rec is None:
        raise HTTPException(status_code=404, detail=f"Property not found: {property_id}")
    return PropertyOut.from_record(rec)
