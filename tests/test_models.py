import json

import pytest

from salesservice.models import (
    OrderItem,
    Product,
    Revenue,
    RevenueByCategory,
    RevenueByProduct,
    RevenueByRegion,
    RevenueRequest,
)


def test_revenue_request_from_dict_reads_both_dates():
    request = RevenueRequest.from_dict({"start_date": "2024-01-01", "end_date": "2024-02-01"})
    assert request.start_date == "2024-01-01"
    assert request.end_date == "2024-02-01"


def test_revenue_request_missing_fields_are_empty():
    request = RevenueRequest.from_dict({})
    assert (request.start_date, request.end_date) == ("", "")


def test_revenue_request_null_field_is_empty():
    request = RevenueRequest.from_dict({"start_date": None, "end_date": "2024-02-01"})
    assert request.start_date == ""


def test_revenue_request_rejects_non_string():
    with pytest.raises(TypeError):
        RevenueRequest.from_dict({"start_date": 20240101})


def test_revenue_to_dict_uses_json_names():
    revenue = Revenue(start_date="a", end_date="b", total_revenue=12.5)
    assert revenue.to_dict() == {"start_date": "a", "end_date": "b", "total_revenue": 12.5}


def test_revenue_to_dict_survives_json_round_trip():
    revenue = Revenue(start_date="2024-01-01", end_date="2024-12-31", total_revenue=3.25)
    decoded = json.loads(json.dumps(revenue.to_dict()))
    assert Revenue(**decoded) == revenue


def test_revenue_by_product_to_dict():
    item = RevenueByProduct(total_revenue=7.5, product_name="Widget")
    assert item.to_dict() == {"total_revenue": 7.5, "product_name": "Widget"}


def test_revenue_by_category_to_dict():
    item = RevenueByCategory(total_revenue=2.0, category="Tools")
    assert item.to_dict() == {"total_revenue": 2.0, "category": "Tools"}


def test_revenue_by_region_uses_region_key():
    item = RevenueByRegion(total_revenue=4.0, region_name="North")
    assert item.to_dict() == {"total_revenue": 4.0, "region": "North"}


def test_order_item_holds_related_product():
    product = Product(uuid="p-1", name="Widget")
    item = OrderItem(product_uuid="p-1", product=product)
    assert item.product.uuid == item.product_uuid