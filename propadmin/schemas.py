from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .domain.parsing import record_to_payload
from .domain.types import ListingPage, PropertyRecord


class PropertyOut(BaseModel):
    id: str
    name: str | None = None
    province: str | None = None
    country: str | None = None
    type: str | None = None
    status: str | None = None
    price: float | None = Field(default=None, ge=0)
    rating: float | None = None
    bedroom: int | None = None
    bathroom: int | None = None
    last_updated: datetime | None = None
    image: str | None = None
    description: str | None = None

    @classmethod
    def from_record(cls, r: PropertyRecord) -> "PropertyOut":
        return cls.model_validate(record_to_payload(r))


class PropertyPageOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: list[PropertyOut]
    total: int = Field(..., ge=0)
    page: int
    total_pages: int = Field(..., ge=0, alias="totalPages")

    @classmethod
    def from_page(cls, p: ListingPage) -> "PropertyPageOut":
        return cls(
            data=[PropertyOut.from_record(r) for r in p.data],
            total=p.total,
            page=p.page,
            total_pages=p.total_pages,
        )


class FacetsOut(BaseModel):
    status: dict[str, int]
    type: dict[str, int]


class HealthOut(BaseModel):
    status: str
    provider: str
