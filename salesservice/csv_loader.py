"""Loading sales records from a CSV export into the database."""

from __future__ import annotations

import csv
import logging
import os
import re
import sqlite3
from uuid import uuid4

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_MIN_COLUMNS = 15


def parse_float(text: str) -> float:
    """Parse a float, giving 0.0 for anything that is not one."""
    if text != text.strip() or "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


def parse_int(text: str) -> int:
    """Parse a decimal integer, giving 0 for anything that is not one."""
    return int(text) if _INT_PATTERN.fullmatch(text) else 0


def _read_records(handle) -> list[list[str]]:
    """Read every record; a malformed file yields no records at all."""
    try:
        records = [row for row in csv.reader(handle) if row]
    except csv.Error:
        return []
    if any(len(row) != len(records[0]) for row in records):
        return []
    return records


def _insert_missing(conn, table: str, key: str, value, columns: dict) -> None:
    if conn.execute(f"SELECT 1 FROM {table} WHERE {key} = ? LIMIT 1", (value,)).fetchone():
        return
    names = ", ".join(columns)
    marks = ", ".join("?" * len(columns))
    conn.execute(f"INSERT INTO {table} ({names}) VALUES ({marks})", tuple(columns.values()))


def _load_row(conn: sqlite3.Connection, row: list[str]) -> None:
    if len(row) < _MIN_COLUMNS:
        raise ValueError(f"expected at least {_MIN_COLUMNS} columns, got {len(row)}")
    customer_uuid, product_uuid = row[2], row[1]
    _insert_missing(conn, "customers", "uuid", customer_uuid,
                    {"uuid": customer_uuid, "name": row[12], "email": row[13], "address": row[14]})
    _insert_missing(conn, "products", "uuid", product_uuid,
                    {"uuid": product_uuid, "name": row[3], "category": row[4], "description": ""})

    order_id = parse_int(row[0])
    found = conn.execute("SELECT uuid FROM orders WHERE id = ?", (order_id,)).fetchone()
    order_uuid = found[0] if found else str(uuid4())
    _insert_missing(conn, "orders", "id", order_id, {
        "id": order_id, "uuid": order_uuid, "customer_uuid": customer_uuid,
        "date_of_sale": row[6], "payment_method": row[11],
        "shipping_cost": parse_float(row[10]), "discount": parse_float(row[9]),
    })

    conn.execute(
        "INSERT INTO order_items (uuid, order_uuid, product_uuid, quantity, unit_price)"
        " VALUES (?, ?, ?, ?, ?)",
        (str(uuid4()), order_uuid, product_uuid, parse_int(row[7]), parse_float(row[8])),
    )
    _insert_missing(conn, "regions", "order_uuid", order_uuid,
                    {"order_uuid": order_uuid, "region_name": row[5]})


def load_csv(conn: sqlite3.Connection, path: str | os.PathLike[str]) -> int:
    """Load the sales CSV at ``path``, skipping its header; return the rows loaded."""
    with open(path, newline="", encoding="utf-8") as handle:
        rows = _read_records(handle)[1:]
    with conn:
        for row in rows:
            _load_row(conn, row)
    logger.info("csv file loaded successfully")
    return len(rows)