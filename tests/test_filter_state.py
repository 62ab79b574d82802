import dataclasses

import pytest

from propadmin.domain.types import FilterState, PropertyStatus, PropertyType, SortOrder


def test_state_is_immutable():
    state = FilterState()
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.page = 2  # type: ignore[misc]


def test_with_filter_resets_page():
    state = FilterState(page=4).with_filter(search="villa")
    assert state.search == "villa"
    assert state.page == 1


def test_toggle_adds_then_removes():
    state = FilterState(page=3)
    on = state.toggle("statuses", PropertyStatus.active)
    assert on.statuses == (PropertyStatus.active,)
    assert on.page == 1

    off = on.toggle("statuses", PropertyStatus.active)
    assert off.statuses == ()
    assert state.statuses == ()


def test_toggle_rejects_single_valued_fields():
    with pytest.raises(ValueError):
        FilterState().toggle("search", "x")


def test_toggle_order_keeps_page():
    state = FilterState(page=2).toggle_order()
    assert state.order == SortOrder.asc
    assert state.page == 2
    assert state.toggle_order().order == SortOrder.desc


def test_cleared_keeps_page_size():
    state = FilterState(search="x", statuses=(PropertyStatus.draft,), page=5, limit=25)
    assert state.cleared() == FilterState(limit=25)


def test_active_filter_count():
    assert FilterState().active_filter_count == 0
    state = FilterState(
        statuses=(PropertyStatus.active, PropertyStatus.draft),
        property_types=(PropertyType.villa,),
        min_price=100,
        max_price=800,
    )
    assert state.active_filter_count == 5
