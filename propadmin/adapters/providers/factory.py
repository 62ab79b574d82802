# propadmin/adapters/providers/factory.py
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import settings
from .base import ListingProvider
from .database import DatabaseListingProvider
from .medusa import MedusaListingProvider
from .memory import InMemoryListingProvider

PROVIDERS = ("memory", "database", "medusa")

_memory: InMemoryListingProvider | None = None


def get_memory_provider() -> InMemoryListingProvider:
    # the snapshot is loaded once per process
    global _memory
    if _memory is None:
        _memory = InMemoryListingProvider.from_settings()
    return _memory


def reset_memory_provider() -> None:
    global _memory
    _memory = None


def validate_provider_name(name: str) -> str:
    key = (name or "").strip().lower()
    if key not in PROVIDERS:
        raise ValueError(f"Unknown LISTING_PROVIDER={name!r} (expected one of {', '.join(PROVIDERS)})")
    return key


def get_provider(session: AsyncSession, name: str | None = None) -> ListingProvider:
    key = validate_provider_name(name or settings.LISTING_PROVIDER)
    if key == "memory":
        return get_memory_provider()
    if key == "database":
        return DatabaseListingProvider(session)
    return MedusaListingProvider()
