import pytest

from propadmin.adapters.providers.database import DatabaseListingProvider
from propadmin.adapters.providers.memory import InMemoryListingProvider
from propadmin.domain.types import FilterState, PropertyStatus, PropertyType, SortField, SortOrder

STATES = [
    FilterState(),
    FilterState(page=2),
    FilterState(search="villa"),
    FilterState(search="PHNOM penh"),
    FilterState(search="100%_"),
    FilterState(statuses=(PropertyStatus.active, PropertyStatus.draft), sort_by=SortField.price, order=SortOrder.asc),
    FilterState(property_types=(PropertyType.house,), sort_by=SortField.rating),
    FilterState(sort_by=SortField.rating, order=SortOrder.asc, limit=5, page=3),
    FilterState(min_price=400, max_price=760),
    FilterState(sort_by="bogus", limit=4),
    FilterState(page=7),
]


@pytest.mark.parametrize("state", STATES)
async def test_database_matches_in_memory(seeded_session_maker, demo_records, state):
    memory = InMemoryListingProvider(records=demo_records)
    expected = await memory.list_page(state)

    async with seeded_session_maker() as session:
        got = await DatabaseListingProvider(session).list_page(state)

    assert [r.id for r in got.data] == [r.id for r in expected.data]
    assert (got.total, got.page, got.total_pages) == (expected.total, expected.page, expected.total_pages)


async def test_get_returns_the_same_record(seeded_session_maker, demo_records):
    memory = InMemoryListingProvider(records=demo_records)
    async with seeded_session_maker() as session:
        provider = DatabaseListingProvider(session)
        assert await provider.get("prop_01") == await memory.get("prop_01")
        assert await provider.get("missing") is None


async def test_facets_match_in_memory(seeded_session_maker, demo_records):
    memory = InMemoryListingProvider(records=demo_records)
    async with seeded_session_maker() as session:
        assert await DatabaseListingProvider(session).facets() == await memory.facets()


async def test_null_ratings_sort_last(seeded_session_maker):
    async with seeded_session_maker() as session:
        provider = DatabaseListingProvider(session)
        for order in SortOrder:
            page = await provider.list_page(FilterState(sort_by=SortField.rating, order=order, limit=100))
            assert page.data[-1].id == "prop_09"
