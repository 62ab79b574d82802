import pytest

from propadmin.domain.parsing import to_datetime
from propadmin.domain.sorting import sort_records
from propadmin.domain.types import PropertyRecord, SortField, SortOrder


def _prices(records):
    return [r.price for r in records]


def test_price_ascending_scenario():
    records = [PropertyRecord(id=str(p), price=p) for p in (200, 50, 100)]
    assert _prices(sort_records(records, SortField.price, SortOrder.asc)) == [50, 100, 200]
    assert _prices(sort_records(records, SortField.price, SortOrder.desc)) == [200, 100, 50]


@pytest.mark.parametrize("order", [SortOrder.asc, SortOrder.desc])
def test_ties_keep_input_order(order):
    records = [
        PropertyRecord(id="a", rating=4.0),
        PropertyRecord(id="b", rating=5.0),
        PropertyRecord(id="c", rating=4.0),
        PropertyRecord(id="d", rating=4.0),
    ]
    ids = [r.id for r in sort_records(records, SortField.rating, order)]
    if order == SortOrder.asc:
        assert ids == ["a", "c", "d", "b"]
    else:
        assert ids == ["b", "a", "c", "d"]


@pytest.mark.parametrize("order", [SortOrder.asc, SortOrder.desc])
def test_missing_keys_go_last(order):
    records = [
        PropertyRecord(id="none1"),
        PropertyRecord(id="p10", price=10),
        PropertyRecord(id="none2"),
        PropertyRecord(id="p5", price=5),
    ]
    ids = [r.id for r in sort_records(records, "price", order)]
    assert ids[2:] == ["none1", "none2"]


def test_last_updated_compares_instants_across_offsets():
    early = PropertyRecord(id="early", last_updated=to_datetime("2025-01-01T10:00:00+07:00"))  # 03:00Z
    late = PropertyRecord(id="late", last_updated=to_datetime("2025-01-01T05:00:00Z"))
    out = sort_records([late, early], SortField.last_updated, SortOrder.asc)
    assert [r.id for r in out] == ["early", "late"]


def test_unknown_field_is_a_no_op(demo_records):
    out = sort_records(demo_records, "square_meters", SortOrder.asc)
    assert out == demo_records
    assert out is not demo_records


@pytest.mark.parametrize("field", list(SortField))
@pytest.mark.parametrize("order", list(SortOrder))
def test_length_preserved_and_idempotent(demo_records, field, order):
    once = sort_records(demo_records, field, order)
    twice = sort_records(once, field, order)
    assert len(once) == len(demo_records)
    assert once == twice
