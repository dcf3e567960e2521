"""Opening the sales database and creating its tables."""

from __future__ import annotations

import logging
import os
import sqlite3

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "salesdb.sqlite3"
DEFAULT_CSV_PATH = "csv_file.csv"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS customers (
    id INTEGER PRIMARY KEY, uuid TEXT, name TEXT, email TEXT, address TEXT);
CREATE TABLE IF NOT EXISTS products (
    id INTEGER PRIMARY KEY, uuid TEXT, name TEXT, category TEXT, description TEXT);
CREATE TABLE IF NOT EXISTS orders (
    id INTEGER PRIMARY KEY, uuid TEXT, customer_uuid TEXT, date_of_sale TEXT,
    payment_method TEXT, shipping_cost REAL, discount REAL);
CREATE TABLE IF NOT EXISTS order_items (
    id INTEGER PRIMARY KEY AUTOINCREMENT, uuid TEXT, order_uuid TEXT,
    product_uuid TEXT, quantity INTEGER, unit_price REAL);
CREATE TABLE IF NOT EXISTS regions (order_uuid TEXT, region_name TEXT);
"""


def init_schema(conn: sqlite3.Connection) -> None:
    """Create the tables if they do not exist yet."""
    conn.executescript(_SCHEMA)
    conn.commit()


def open_database(path: str | os.PathLike[str]) -> sqlite3.Connection:
    """Open the database at ``path`` and make sure its tables exist."""
    conn = sqlite3.connect(os.fspath(path), check_same_thread=False)
    init_schema(conn)
    logger.info("Connected to database %s", os.fspath(path))
    return conn