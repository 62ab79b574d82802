from datetime import datetime, timezone
from itertools import combinations

from propadmin.domain.filtering import filter_records
from propadmin.domain.types import FilterState, PropertyRecord, PropertyStatus, PropertyType


def _r(id, **kw):
    return PropertyRecord(id=id, **kw)


def test_default_state_is_identity(demo_records):
    sparse = [_r("bare"), _r("no_price", name="Somewhere", status=PropertyStatus.draft)]
    records = demo_records + sparse
    assert filter_records(records, FilterState()) == records


def test_every_result_has_a_selected_status(demo_records):
    statuses = list(PropertyStatus)
    for n in range(1, len(statuses) + 1):
        for subset in combinations(statuses, n):
            out = filter_records(demo_records, FilterState(statuses=subset))
            assert out
            assert all(r.status in subset for r in out)


def test_min_price_scenario():
    records = [
        _r("a", price=100, status=PropertyStatus.active),
        _r("b", price=50, status=PropertyStatus.draft),
    ]
    assert filter_records(records, FilterState(min_price=60)) == [records[0]]


def test_search_is_case_insensitive_on_name():
    villa = _r("v", name="Luxury Sunset Villa")
    other = _r("o", name="City Flat")
    assert filter_records([villa, other], FilterState(search="villa")) == [villa]
    assert filter_records([villa, other], FilterState(search="  SUNSET ")) == [villa]


def test_search_matches_location(demo_records):
    out = filter_records(demo_records, FilterState(search="phnom penh"))
    assert {r.id for r in out} == {"prop_02", "prop_05", "prop_10"}

    out = filter_records(demo_records, FilterState(search="penh, camb"))
    assert {r.id for r in out} == {"prop_02", "prop_05", "prop_10"}


def test_price_bounds_are_inclusive():
    records = [_r(str(p), price=p) for p in (100, 200, 300)]
    out = filter_records(records, FilterState(min_price=100, max_price=200))
    assert [r.id for r in out] == ["100", "200"]


def test_clauses_are_anded(demo_records):
    state = FilterState(
        statuses=(PropertyStatus.active,),
        property_types=(PropertyType.house,),
        max_price=560,
    )
    out = filter_records(demo_records, state)
    assert [r.id for r in out] == ["prop_07", "prop_08"]


def test_missing_fields_fail_active_clauses():
    bare = _r("bare")
    assert filter_records([bare], FilterState(search="x")) == []
    assert filter_records([bare], FilterState(statuses=(PropertyStatus.active,))) == []
    assert filter_records([bare], FilterState(property_types=(PropertyType.villa,))) == []
    assert filter_records([bare], FilterState(max_price=1000)) == []


def test_preserves_input_order():
    ts = datetime(2025, 1, 1, tzinfo=timezone.utc)
    records = [_r(str(i), status=PropertyStatus.active, last_updated=ts) for i in (3, 1, 2)]
    assert [r.id for r in filter_records(records, FilterState(statuses=(PropertyStatus.active,)))] == ["3", "1", "2"]
