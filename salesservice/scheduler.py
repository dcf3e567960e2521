"""Running a job once a day at a fixed UTC time."""

from __future__ import annotations

import logging
import re
import threading
from contextlib import closing
from datetime import datetime, time, timedelta, timezone
from typing import Callable

from salesservice.csv_loader import load_csv
from salesservice.database import open_database

logger = logging.getLogger(__name__)

_AT_PATTERN = re.compile(r"(\d{1,2}):(\d{2})(?::(\d{2}))?")
REFRESH_TIME = "01:00"


def _parse_at(at: str | time) -> time:
    if isinstance(at, time):
        return at.replace(tzinfo=None)
    match = _AT_PATTERN.fullmatch(at)
    if match is None:
        raise ValueError(f"invalid time of day: {at!r}")
    return time(*(int(part or 0) for part in match.groups()))


class DailyScheduler:
    """Calls a job every day at a given time of day in UTC, on a background thread."""

    def __init__(self, at: str | time, job: Callable[[], object]) -> None:
        self.at = _parse_at(at)
        self.job = job
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def next_run(self, now: datetime) -> datetime:
        """The first scheduled moment strictly after ``now``, in UTC."""
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        now = now.astimezone(timezone.utc)
        candidate = datetime.combine(now.date(), self.at, tzinfo=timezone.utc)
        return candidate if candidate > now else candidate + timedelta(days=1)

    def start(self) -> None:
        """Start running the job in the background."""
        if self.running:
            raise RuntimeError("scheduler is already running")
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="daily-scheduler", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the background thread and wait for it to finish."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def _run(self) -> None:
        target = self.next_run(datetime.now(timezone.utc))
        while not self._stop.is_set():
            now = datetime.now(timezone.utc)
            remaining = (target - now).total_seconds()
            if remaining > 0:
                self._stop.wait(remaining)
                continue
            try:
                self.job()
            except Exception:
                logger.exception("scheduled job failed")
            target = self.next_run(max(now, target))


def schedule_csv_refresh(db_path, csv_path) -> DailyScheduler:
    """Start reloading the sales CSV into the database every day at 01:00 UTC."""

    def refresh() -> None:
        with closing(open_database(db_path)) as conn:
            load_csv(conn, csv_path)

    scheduler = DailyScheduler(REFRESH_TIME, refresh)
    scheduler.start()
    return scheduler