import csv
import sqlite3

import pytest

from salesservice import order_db
from salesservice.app import create_app, main

HEADER = [
    "order_id", "product_id", "customer_id", "product_name", "category", "region",
    "date_of_sale", "quantity", "unit_price", "discount", "shipping_cost",
    "payment_method", "customer_name", "customer_email", "customer_address",
]
ROWS = [
    ["1", "p-1", "c-1", "Laptop", "Electronics", "North", "2024-01-05", "2", "500.0",
     "10", "5.0", "Card", "Alice", "alice@example.com", "1 Main St"],
    ["2", "p-2", "c-2", "Shirt", "Clothing", "South", "2024-01-10", "3", "20.0",
     "0", "2.0", "Cash", "Bob", "bob@example.com", "2 Oak St"],
]
RANGE = {"start_date": "2024-01-01", "end_date": "2024-01-31"}


@pytest.fixture
def paths(tmp_path):
    csv_path = tmp_path / "sales.csv"
    with open(csv_path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(HEADER)
        writer.writerows(ROWS)
    return tmp_path / "sales.sqlite3", csv_path


@pytest.fixture
def client(paths):
    db_path, csv_path = paths
    app = create_app(db_path, csv_path)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def loaded_client(client):
    assert client.get("/sales-service/data/refresh").status_code == 200
    return client


def test_refresh_succeeds(client):
    response = client.get("/sales-service/data/refresh")
    assert response.status_code == 200
    assert response.get_json() == {"message": "Data refreshed successfully"}


def test_refresh_missing_file(tmp_path):
    app = create_app(tmp_path / "db.sqlite3", tmp_path / "missing.csv")
    response = app.test_client().get("/sales-service/data/refresh")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid request payload"}


def test_total_revenue_matches_database(loaded_client, paths):
    response = loaded_client.post("/sales-service/order/revenue", query_string=RANGE)
    assert response.status_code == 200
    body = response.get_json()["revenue"]
    assert body["start_date"] == RANGE["start_date"]
    assert body["end_date"] == RANGE["end_date"]
    conn = sqlite3.connect(paths[0])
    try:
        expected = order_db.revenue_for_date_range(conn, RANGE["start_date"], RANGE["end_date"])
    finally:
        conn.close()
    assert body["total_revenue"] == pytest.approx(expected.total_revenue)


def test_revenue_by_products(loaded_client):
    response = loaded_client.post("/sales-service/order/revenue_by_products", query_string=RANGE)
    assert response.status_code == 200
    items = response.get_json()["revenue"]
    assert {item["product_name"] for item in items} == {"Laptop", "Shirt"}
    totals = [item["total_revenue"] for item in items]
    assert totals == sorted(totals, reverse=True)


def test_revenue_by_category(loaded_client):
    response = loaded_client.post("/sales-service/order/revenue_by_category", query_string=RANGE)
    items = response.get_json()["revenue"]
    assert {item["category"] for item in items} == {"Electronics", "Clothing"}


def test_revenue_by_region_uses_region_key(loaded_client):
    response = loaded_client.post("/sales-service/order/revenue_by_region", query_string=RANGE)
    items = response.get_json()["revenue"]
    assert {item["region"] for item in items} == {"North", "South"}


def test_empty_range_gives_empty_list(loaded_client):
    response = loaded_client.post(
        "/sales-service/order/revenue_by_region",
        query_string={"start_date": "2030-01-01", "end_date": "2030-01-31"},
    )
    assert response.get_json() == {"revenue": []}


@pytest.mark.parametrize(
    "endpoint", ["revenue", "revenue_by_products", "revenue_by_category", "revenue_by_region"]
)
@pytest.mark.parametrize(
    "query", [{}, {"start_date": "2024-01-01"}, {"end_date": "2024-01-31"}]
)
def test_missing_dates_rejected(client, endpoint, query):
    response = client.post(f"/sales-service/order/{endpoint}", query_string=query)
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid request payload"}


def test_revenue_requires_post(client):
    response = client.get("/sales-service/order/revenue", query_string=RANGE)
    assert response.status_code == 405


def test_database_failure_gives_server_error(tmp_path):
    app = create_app(tmp_path, tmp_path / "sales.csv")
    response = app.test_client().post("/sales-service/order/revenue", query_string=RANGE)
    assert response.status_code == 500
    assert response.get_json() == {"error": "Could not get result"}


def test_main_rejects_bad_port():
    with pytest.raises(SystemExit):
        main(["--port", "not-a-port"])