"""Revenue figures for a date range, with database failures reported uniformly."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from salesservice import order_db
from salesservice.models import Revenue, RevenueByCategory, RevenueByProduct, RevenueByRegion

logger = logging.getLogger(__name__)

_FAILURE_MESSAGE = "Please try again later"


class RevenueServiceError(Exception):
    """Raised when revenue figures cannot be read from the database."""


@contextmanager
def _reading() -> Iterator[None]:
    try:
        yield
    except sqlite3.Error as exc:
        logger.error("error in getting revenue: %s", exc)
        raise RevenueServiceError(_FAILURE_MESSAGE) from exc


def get_revenue(conn: sqlite3.Connection, start_date: str, end_date: str) -> Revenue:
    """Total revenue between the two dates, carrying the range it covers."""
    with _reading():
        revenue = order_db.revenue_for_date_range(conn, start_date, end_date)
    revenue.start_date = start_date
    revenue.end_date = end_date
    return revenue


def get_revenue_by_product(
    conn: sqlite3.Connection, start_date: str, end_date: str
) -> list[RevenueByProduct]:
    """Revenue per product between the two dates, highest first."""
    with _reading():
        return order_db.revenue_by_product(conn, start_date, end_date)


def get_revenue_by_category(
    conn: sqlite3.Connection, start_date: str, end_date: str
) -> list[RevenueByCategory]:
    """Revenue per category between the two dates, highest first."""
    with _reading():
        return order_db.revenue_by_category(conn, start_date, end_date)


def get_revenue_by_region(
    conn: sqlite3.Connection, start_date: str, end_date: str
) -> list[RevenueByRegion]:
    """Revenue per region between the two dates, highest first."""
    with _reading():
        return order_db.revenue_by_region(conn, start_date, end_date)