import json

import pytest

from propadmin.adapters.providers import factory
from propadmin.adapters.providers.memory import InMemoryListingProvider
from propadmin.config import settings
from propadmin.domain.types import FilterState


async def test_from_settings_reads_fixture_file(tmp_path, monkeypatch):
    path = tmp_path / "props.json"
    path.write_text(
        json.dumps(
            {
                "data": [
                    {"id": "a", "name": "Alpha", "price": 10},
                    {"id": "a", "name": "Duplicate"},
                    {"name": "no id"},
                    {"id": "b", "name": "Beta", "price": 20},
                ]
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.setattr(settings, "FIXTURE_PATH", str(path))

    provider = InMemoryListingProvider.from_settings()
    page = await provider.list_page(FilterState(sort_by="price", limit=10))

    assert [r.id for r in page.data] == ["b", "a"]
    assert (await provider.get("a")).name == "Alpha"


async def test_default_snapshot_is_the_demo_set(monkeypatch):
    monkeypatch.setattr(settings, "FIXTURE_PATH", None)
    factory.reset_memory_provider()
    try:
        provider = factory.get_memory_provider()
        assert provider is factory.get_memory_provider()
        assert (await provider.list_page(FilterState())).total == 12
    finally:
        factory.reset_memory_provider()


def test_unknown_provider_name_is_rejected():
    with pytest.raises(ValueError):
        factory.validate_provider_name("elasticsearch")
    assert factory.validate_provider_name(" Database ") == "database"
