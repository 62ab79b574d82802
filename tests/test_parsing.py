from datetime import datetime, timezone

import pytest

from propadmin.domain.parsing import page_from_payload, record_from_payload, record_to_payload, to_datetime
from propadmin.domain.types import PropertyStatus, PropertyType
from propadmin.schemas import PropertyOut


def test_record_from_flat_payload():
    rec = record_from_payload(
        {
            "id": "p1",
            "name": " Luxury Sunset Villa ",
            "province": "Siem Reap",
            "country": "Cambodia",
            "type": "Villa",
            "status": "active",
            "price": "850",
            "rating": 4.8,
            "bedroom": "4",
            "bathroom": 3,
            "last_updated": "2025-03-14T09:30:00Z",
        }
    )
    assert rec.name == "Luxury Sunset Villa"
    assert rec.location == "Siem Reap, Cambodia"
    assert rec.property_type == PropertyType.villa
    assert rec.status == PropertyStatus.active
    assert rec.price == 850.0
    assert rec.bedroom == 4
    assert rec.last_updated == datetime(2025, 3, 14, 9, 30, tzinfo=timezone.utc)


def test_record_from_backend_shape():
    rec = record_from_payload(
        {
            "id": 17,
            "title": "Kep Cottage",
            "location": {"province": "Kep", "country": "Cambodia"},
            "propertyType": "house",
            "updatedAt": "2025-01-02T03:04:05",
        }
    )
    assert rec.id == "17"
    assert rec.name == "Kep Cottage"
    assert rec.location == "Kep, Cambodia"
    assert rec.property_type == PropertyType.house
    assert rec.last_updated.tzinfo is not None


def test_invalid_values_become_missing():
    rec = record_from_payload({"id": "x", "status": "sold", "type": "castle", "price": -5, "rating": "n/a"})
    assert rec.status is None
    assert rec.property_type is None
    assert rec.price is None
    assert rec.rating is None
    assert rec.location is None


def test_payload_without_id_is_rejected():
    with pytest.raises(ValueError):
        record_from_payload({"name": "orphan"})


def test_epoch_and_naive_timestamps_are_utc():
    assert to_datetime(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert to_datetime("2025-02-01T00:00:00") == datetime(2025, 2, 1, tzinfo=timezone.utc)
    assert to_datetime("yesterday") is None


def test_record_payload_round_trip():
    original = record_from_payload({"id": "p", "name": "N", "type": "villa", "last_updated": "2025-01-01T00:00:00Z"})
    assert record_from_payload(record_to_payload(original)) == original


def test_page_from_list_shape():
    page = page_from_payload(
        {"data": [{"id": "a"}, {"name": "no id"}], "total": 31, "page": 4, "totalPages": 4},
        page=1,
        limit=10,
    )
    assert [r.id for r in page.data] == ["a"]
    assert page.total == 31
    assert page.page == 4
    assert page.total_pages == 4


def test_page_from_medusa_shape_derives_pages():
    page = page_from_payload({"properties": [{"id": "a"}], "count": 21}, page=2, limit=10)
    assert page.total == 21
    assert page.page == 2
    assert page.total_pages == 3


def test_page_from_non_object_is_rejected():
    with pytest.raises(ValueError):
        page_from_payload(["not", "a", "page"], page=1, limit=10)


def test_response_model_uses_list_api_keys():
    rec = record_from_payload(
        {"id": "p", "name": "N", "type": "villa", "status": "draft", "price": "450", "last_updated": "2025-01-01T00:00:00Z"}
    )
    out = PropertyOut.from_record(rec)
    assert out.type == "villa"
    assert out.status == "draft"
    assert out.price == 450.0
    assert out.last_updated == datetime(2025, 1, 1, tzinfo=timezone.utc)
