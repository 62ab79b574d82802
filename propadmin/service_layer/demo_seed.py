# propadmin/service_layer/demo_seed.py
from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from ..adapters.repos.properties import PropertyRepository

DEMO_PROPERTIES: list[dict[str, Any]] = [
    {
        "id": "prop_01", "name": "Luxury Sunset Villa", "province": "Siem Reap", "country": "Cambodia",
        "type": "villa", "status": "active", "price": 850, "rating": 4.8, "bedroom": 4, "bathroom": 3,
        "last_updated": "2025-03-14T09:30:00Z", "description": "Pool villa near the temples",
    },
    {
        "id": "prop_02", "name": "Riverside Apartment", "province": "Phnom Penh", "country": "Cambodia",
        "type": "apartment", "status": "active", "price": 420, "rating": 4.2, "bedroom": 2, "bathroom": 1,
        "last_updated": "2025-03-10T16:00:00Z",
    },
    {
        "id": "prop_03", "name": "Old Market House", "province": "Battambang", "country": "Cambodia",
        "type": "house", "status": "draft", "price": 260, "rating": 3.9, "bedroom": 3, "bathroom": 2,
        "last_updated": "2025-02-27T08:15:00Z",
    },
    {
        "id": "prop_04", "name": "Kep Seaside Villa", "province": "Kep", "country": "Cambodia",
        "type": "villa", "status": "archived", "price": 690, "rating": 4.5, "bedroom": 3, "bathroom": 3,
        "last_updated": "2024-12-01T11:00:00Z",
    },
    {
        "id": "prop_05", "name": "BKK1 Office Building", "province": "Phnom Penh", "country": "Cambodia",
        "type": "building", "status": "active", "price": 990, "rating": 4.0, "bedroom": 0, "bathroom": 6,
        "last_updated": "2025-03-12T13:45:00Z",
    },
    {
        "id": "prop_06", "name": "Studio Montmartre", "province": "Ile-de-France", "country": "France",
        "type": "apartment", "status": "reject", "price": 610, "rating": 3.4, "bedroom": 1, "bathroom": 1,
        "last_updated": "2025-01-19T10:20:00Z",
    },
    {
        "id": "prop_07", "name": "Lyon Family House", "province": "Auvergne-Rhone-Alpes", "country": "France",
        "type": "house", "status": "active", "price": 540, "rating": 4.6, "bedroom": 4, "bathroom": 2,
        "last_updated": "2025-03-01T07:05:00Z",
    },
    {
        "id": "prop_08", "name": "Kampot Pepper Farm House", "province": "Kampot", "country": "Cambodia",
        "type": "house", "status": "active", "price": 180, "rating": 4.1, "bedroom": 2, "bathroom": 1,
        "last_updated": "2025-02-11T18:40:00Z",
    },
    {
        "id": "prop_09", "name": "Nice Hillside Villa", "province": "Provence-Alpes-Cote d'Azur", "country": "France",
        "type": "villa", "status": "draft", "price": 975, "rating": None, "bedroom": 5, "bathroom": 4,
        "last_updated": "2025-03-15T12:00:00Z",
    },
    {
        "id": "prop_10", "name": "Tonle Sap Apartments", "province": "Phnom Penh", "country": "Cambodia",
        "type": "building", "status": "active", "price": 760, "rating": 3.8, "bedroom": 12, "bathroom": 12,
        "last_updated": "2025-01-30T09:00:00Z",
    },
    {
        "id": "prop_11", "name": "Sihanoukville Beach Apartment", "province": "Preah Sihanouk", "country": "Cambodia",
        "type": "apartment", "status": "archived", "price": 330, "rating": 3.6, "bedroom": 2, "bathroom": 2,
        "last_updated": "2024-11-22T15:30:00Z",
    },
    {
        "id": "prop_12", "name": "Bordeaux Townhouse", "province": "Nouvelle-Aquitaine", "country": "France",
        "type": "house", "status": "active", "price": 590, "rating": 4.3, "bedroom": 3, "bathroom": 2,
        "last_updated": "2025-02-20T14:10:00Z",
    },
]


async def seed_demo(session: AsyncSession, items: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    """
    Idempotent demo seed: upserts by listing id, safe to run multiple times.
    """
    repo = PropertyRepository(session)
    rows = items if items is not None else DEMO_PROPERTIES
    for payload in rows:
        await repo.upsert_from_payload(payload)
    return {"seeded": len(rows)}
