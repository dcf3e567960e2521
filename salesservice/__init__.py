"""Sales revenue reporting: CSV loading into SQLite, revenue queries, and a Flask HTTP service."""

__version__ = "0.1.0"