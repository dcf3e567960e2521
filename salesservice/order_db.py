"""Revenue queries over the order tables."""

from __future__ import annotations

import sqlite3

from salesservice.models import Revenue, RevenueByCategory, RevenueByProduct, RevenueByRegion


def revenue_for_date_range(conn: sqlite3.Connection, start_date: str, end_date: str) -> Revenue:
    """Total of quantity times unit price for orders sold within the range, inclusive."""
    (total,) = conn.execute(
        "SELECT SUM(order_items.quantity * order_items.unit_price) AS total_revenue"
        " FROM order_items JOIN orders ON order_items.order_uuid = orders.uuid"
        " WHERE orders.date_of_sale BETWEEN ? AND ?",
        (start_date, end_date),
    ).fetchone()
    return Revenue(total_revenue=float(total) if total is not None else 0.0)


def revenue_by_product(
    conn: sqlite3.Connection, start_date: str, end_date: str
) -> list[RevenueByProduct]:
    """Revenue per product after the order discount, highest first."""
    rows = conn.execute(
        "SELECT p.name AS product_name,"
        " SUM((oi.unit_price * oi.quantity) - (oi.unit_price * oi.quantity * o.discount / 100))"
        " AS total_revenue"
        " FROM order_items oi"
        " JOIN products p ON oi.product_uuid = p.uuid"
        " JOIN orders o ON oi.order_uuid = o.uuid"
        " WHERE o.date_of_sale BETWEEN ? AND ?"
        " GROUP BY p.uuid, p.name"
        " ORDER BY total_revenue DESC",
        (start_date, end_date),
    )
    return [
        RevenueByProduct(total_revenue=float(total or 0.0), product_name=name)
        for name, total in rows
    ]


def revenue_by_category(
    conn: sqlite3.Connection, start_date: str, end_date: str
) -> list[RevenueByCategory]:
    """Revenue per product category, highest first."""
    rows = conn.execute(
        "SELECT p.category, SUM(oi.unit_price * oi.quantity) AS total_revenue"
        " FROM order_items oi"
        " JOIN products p ON oi.product_uuid = p.uuid"
        " JOIN orders o ON oi.order_uuid = o.uuid"
        " WHERE o.date_of_sale BETWEEN ? AND ?"
        " GROUP BY p.category"
        " ORDER BY total_revenue DESC",
        (start_date, end_date),
    )
    return [
        RevenueByCategory(total_revenue=float(total or 0.0), category=category)
        for category, total in rows
    ]


def revenue_by_region(
    conn: sqlite3.Connection, start_date: str, end_date: str
) -> list[RevenueByRegion]:
    """Revenue per shipping region, highest first."""
    rows = conn.execute(
        "SELECT r.region_name, SUM(oi.unit_price * oi.quantity) AS total_revenue"
        " FROM order_items oi"
        " JOIN orders o ON oi.order_uuid = o.uuid"
        " JOIN regions r ON o.uuid = r.order_uuid"
        " WHERE o.date_of_sale BETWEEN ? AND ?"
        " GROUP BY r.region_name"
        " ORDER BY total_revenue DESC",
        (start_date, end_date),
    )
    return [
        RevenueByRegion(total_revenue=float(total or 0.0), region_name=region)
        for region, total in rows
    ]