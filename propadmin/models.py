# propadmin/models.py
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, Float, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from .domain.types import PropertyRecord, PropertyStatus, PropertyType


class Base(DeclarativeBase):
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Property(Base):
    __tablename__ = "properties"

    # insertion order; used as the stable tie-breaker when sorting in SQL
    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(64), unique=True, index=True)

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    province: Mapped[str | None] = mapped_column(String(120), nullable=True)
    country: Mapped[str | None] = mapped_column(String(120), nullable=True)

    property_type: Mapped[PropertyType | None] = mapped_column(Enum(PropertyType), nullable=True, index=True)
    status: Mapped[PropertyStatus | None] = mapped_column(Enum(PropertyStatus), nullable=True, index=True)

    price: Mapped[float | None] = mapped_column(Float, nullable=True, index=True)
    rating: Mapped[float | None] = mapped_column(Float, nullable=True)
    bedroom: Mapped[int | None] = mapped_column(Integer, nullable=True)
    bathroom: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # stored as naive UTC; SQLite drops tzinfo anyway
    last_updated: Mapped[datetime | None] = mapped_column(DateTime, nullable=True, index=True)

    image: Mapped[str | None] = mapped_column(String(512), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: _utcnow().replace(tzinfo=None))

    def to_record(self) -> PropertyRecord:
        last_updated = self.last_updated
        if last_updated is not None and last_updated.tzinfo is None:
            last_updated = last_updated.replace(tzinfo=timezone.utc)
        return PropertyRecord(
            id=self.id,
            name=self.name,
            province=self.province,
            country=self.country,
            property_type=self.property_type,
            status=self.status,
            price=self.price,
            rating=self.rating,
            bedroom=self.bedroom,
            bathroom=self.bathroom,
            last_updated=last_updated,
            image=self.image,
            description=self.description,
        )
