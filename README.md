# salesservice

A small HTTP service for sales reporting. It loads order data from a CSV file
into an SQLite database and answers revenue questions for a date range: total
revenue, and revenue broken down by product, by category and by region. While
the server runs, the CSV is reloaded once a day at 01:00 UTC, and it can also
be reloaded on demand.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
salesservice
```

Options:

| Option   | Default           | Meaning                      |
|----------|-------------------|------------------------------|
| `--db`   | `salesdb.sqlite3` | path of the SQLite database  |
| `--csv`  | `csv_file.csv`    | path of the sales CSV file   |
| `--host` | `0.0.0.0`         | address to listen on         |
| `--port` | `8000`            | port to listen on            |

The command creates the database tables if they are missing, starts the daily
01:00 UTC reload of the CSV on a background thread, and serves the application
with Flask's built-in server.

## Endpoints

All revenue endpoints take `start_date` and `end_date` as query parameters.
Both are required. A request without one of them gets a `400` response with
`{"error": "Invalid request payload"}`. If the database query fails, the
response is `500` with `{"error": "Could not get result"}`.

Dates are compared as text with SQL `BETWEEN`, both ends included, so they
should be written in a form that sorts correctly, such as `YYYY-MM-DD`, and
in the same form as the dates in the CSV.

| Method | Path                                       | Result                                              |
|--------|--------------------------------------------|-----------------------------------------------------|
| POST   | `/sales-service/order/revenue`             | total of quantity × unit price for the range        |
| POST   | `/sales-service/order/revenue_by_products` | revenue per product, net of discount, highest first |
| POST   | `/sales-service/order/revenue_by_category` | revenue per category, highest first                 |
| POST   | `/sales-service/order/revenue_by_region`   | revenue per region, highest first                   |
| GET    | `/sales-service/data/refresh`              | loads the CSV into the database                     |

Example:

```
curl -X POST "http://localhost:8000/sales-service/order/revenue?start_date=2024-01-01&end_date=2024-12-31"
```

```json
{"revenue": {"start_date": "2024-01-01", "end_date": "2024-12-31", "total_revenue": 1234.5}}
```

The breakdown endpoints answer with a list under `"revenue"`, each entry
holding `total_revenue` and one of `product_name`, `category` or `region`.

The refresh endpoint answers `{"message": "Data refreshed successfully"}`, or
`400` with `{"error": "Invalid request payload"}` if the file cannot be read or
a row is too short.

## CSV layout

The first row is a header and is skipped. Each row needs at least 15 columns,
read in this order:

0. order id
1. product id
2. customer id
3. product name
4. category
5. region
6. date of sale
7. quantity
8. unit price
9. discount (percent)
10. shipping cost
11. payment method
12. customer name
13. customer e-mail
14. customer address

Numbers that cannot be parsed are stored as 0. A file whose rows do not all
have the same number of fields, or that is not valid CSV, loads no rows.

Customers and products are added only if their id is not stored yet, orders
only if their order id is new, and each order gets one region. Every row adds
an order item, however, so loading the same file again counts its items again.
The whole file is loaded in one transaction.

## Using it as a library

```python
from salesservice.database import open_database
from salesservice.csv_loader import load_csv
from salesservice.revenue_service import get_revenue, get_revenue_by_region

conn = open_database("sales.db")
rows = load_csv(conn, "orders.csv")   # number of rows loaded

print(get_revenue(conn, "2024-01-01", "2024-12-31").to_dict())
for row in get_revenue_by_region(conn, "2024-01-01", "2024-12-31"):
    print(row.to_dict())
```

Modules:

- `salesservice.database`: `open_database(path)` and `init_schema(conn)`.
- `salesservice.csv_loader`: `load_csv(conn, path)`, `parse_int(text)`,
  `parse_float(text)`.
- `salesservice.order_db`: the raw queries `revenue_for_date_range`,
  `revenue_by_product`, `revenue_by_category`, `revenue_by_region`.
- `salesservice.revenue_service`: `get_revenue`, `get_revenue_by_product`,
  `get_revenue_by_category`, `get_revenue_by_region`; database errors are
  raised as `RevenueServiceError`.
- `salesservice.models`: the record dataclasses (`Customer`, `Product`,
  `Order`, `OrderItem`, `Region`), `RevenueRequest.from_dict`, and the result
  types `Revenue`, `RevenueByProduct`, `RevenueByCategory`, `RevenueByRegion`
  with `to_dict()`.
- `salesservice.scheduler`: `DailyScheduler(at, job)` runs a job every day at
  a UTC time of day such as `"01:00"` (`start()`, `stop()`,
  `next_run(now)`); `schedule_csv_refresh(db_path, csv_path)` starts the
  daily 01:00 reload.
- `salesservice.app`: `create_app(db_path, csv_path)` builds the Flask
  application, so it can be served with any WSGI server; `main()` is the
  `salesservice` command.

## What it does not do

- There is no authentication or access control on any endpoint.
- Storage is a local SQLite file only; there is no support for a separate
  database server.
- The `salesservice` command uses Flask's development server; for production
  use, serve `create_app(...)` with a WSGI server.