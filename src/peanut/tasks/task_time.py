# src/peanut/tasks/task_time.py

"""Time helpers shared by the store, the formatter and the console handlers."""

from __future__ import annotations

from datetime import datetime, timedelta

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"

# Fixed width so that string comparison in SQLite matches chronological order.
STORAGE_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

# Tried in order, first match wins.
INPUT_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
    "%Y-%m-%d",
    "%Y/%m/%d",
)


def parse_time(text: str | None, now: datetime | None = None) -> datetime | None:
    """
    Parse a user-typed timestamp.

    - "" (or whitespace) -> None (field left empty)
    - one of INPUT_FORMATS -> that moment
    - anything else -> `now` (deliberately lenient: a typo still records "about now")
    """
    s = (text or "").strip()
    if not s:
        return None

    for fmt in INPUT_FORMATS:
        try:
            dt = datetime.strptime(s, fmt)
        except ValueError:
            continue
        # strptime also takes "2024-1-2"; only zero-padded literals count.
        if dt.strftime(fmt) == s:
            return dt

    return now if now is not None else datetime.now()


def format_time(dt: datetime | None) -> str:
    if dt is None:
        return ""
    return dt.strftime(DISPLAY_FORMAT)


def to_db(dt: datetime | None) -> str | None:
    if dt is None:
        return None
    return dt.strftime(STORAGE_FORMAT)


def from_db(raw: str | None) -> datetime | None:
    if not raw:
        return None
    return datetime.fromisoformat(str(raw))


def week_begin(now: datetime | None = None) -> datetime:
    """Monday of the current week, keeping the time-of-day of `now` (Sunday -> 6 days back)."""
    if now is None:
        now = datetime.now()
    return now - timedelta(days=now.weekday())


def month_begin(now: datetime | None = None) -> datetime:
    """Day 1 of the current month, keeping the time-of-day of `now`."""
    if now is None:
        now = datetime.now()
    return now.replace(day=1)
