"""HTTP interface of the sales service."""

from __future__ import annotations

import argparse
import logging
import sqlite3
from contextlib import closing, contextmanager
from typing import Any, Callable, Iterator

from flask import Flask, jsonify, request

from salesservice import revenue_service
from salesservice.csv_loader import load_csv
from salesservice.database import DEFAULT_CSV_PATH, DEFAULT_DB_PATH, open_database
from salesservice.revenue_service import RevenueServiceError
from salesservice.scheduler import schedule_csv_refresh

logger = logging.getLogger(__name__)

_BAD_REQUEST = {"error": "Invalid request payload"}
_NO_RESULT = {"error": "Could not get result"}


def _to_json(result: Any) -> Any:
    if isinstance(result, list):
        return [item.to_dict() for item in result]
    return result.to_dict()


def create_app(db_path=DEFAULT_DB_PATH, csv_path=DEFAULT_CSV_PATH) -> Flask:
    """Build the web application serving revenue reports and data refreshes."""
    app = Flask(__name__)

    @contextmanager
    def connection() -> Iterator[sqlite3.Connection]:
        with closing(open_database(db_path)) as conn:
            yield conn

    def add_revenue_route(name: str, query: Callable[[sqlite3.Connection, str, str], Any]) -> None:
        def view():
            start_date = request.args.get("start_date", "")
            end_date = request.args.get("end_date", "")
            if not start_date:
                logger.error("%s: start_date is not valid", name)
                return jsonify(_BAD_REQUEST), 400
            if not end_date:
                logger.error("%s: end_date is not valid", name)
                return jsonify(_BAD_REQUEST), 400
            try:
                with connection() as conn:
                    result = query(conn, start_date, end_date)
            except (RevenueServiceError, sqlite3.Error) as exc:
                logger.error("%s: failed to get revenue: %s", name, exc)
                return jsonify(_NO_RESULT), 500
            return jsonify({"revenue": _to_json(result)}), 200

        app.add_url_rule(
            f"/sales-service/order/{name}", endpoint=name, view_func=view, methods=["POST"]
        )

    add_revenue_route("revenue", revenue_service.get_revenue)
    add_revenue_route("revenue_by_products", revenue_service.get_revenue_by_product)
    add_revenue_route("revenue_by_category", revenue_service.get_revenue_by_category)
    add_revenue_route("revenue_by_region", revenue_service.get_revenue_by_region)

    @app.get("/sales-service/data/refresh")
    def refresh():
        try:
            with connection() as conn:
                load_csv(conn, csv_path)
        except (OSError, ValueError, sqlite3.Error) as exc:
            logger.error("refresh failed: %s", exc)
            return jsonify(_BAD_REQUEST), 400
        return jsonify({"message": "Data refreshed successfully"}), 200

    return app


def main(argv: list[str] | None = None) -> None:
    """Run the sales service with its daily data refresh."""
    parser = argparse.ArgumentParser(prog="salesservice", description=main.__doc__)
    parser.add_argument("--db", default=DEFAULT_DB_PATH, help="path of the SQLite database")
    parser.add_argument("--csv", default=DEFAULT_CSV_PATH, help="path of the sales CSV file")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=8000, help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    open_database(args.db).close()
    app = create_app(args.db, args.csv)
    scheduler = schedule_csv_refresh(args.db, args.csv)
    try:
        app.run(host=args.host, port=args.port)
    finally:
        scheduler.stop()