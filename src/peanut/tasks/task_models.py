# src/peanut/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from enum import IntEnum

NAME_MAX_LEN = 128


class TaskStatus(IntEnum):
    """
    Task lifecycle status.

    Values are persisted as-is in the `status` column (TINYINT), so never renumber them.
    NONE is a sentinel: it is never assigned on creation and means "any status" in filters.
    """

    NONE = 0
    IN_PROGRESS = 1
    FINISHED = 2
    CANCELLED = 3

    @classmethod
    def parse(cls, raw: str | None, default: TaskStatus) -> TaskStatus:
        """Parse user input like 'in_progress' / 'FINISHED'. Unknown text yields `default`."""
        key = (raw or "").strip().upper()
        if key in ("IN_PROGRESS", "FINISHED", "CANCELLED"):
            return cls[key]
        return default

    @classmethod
    def from_db(cls, raw: int | None) -> TaskStatus:
        try:
            return cls(int(raw or 0))
        except ValueError:
            return cls.NONE


@dataclass(slots=True)
class Task:
    id: int
    name: str
    status: TaskStatus
    ctime: datetime

    actual_start: datetime | None = None
    expected_end: datetime | None = None
    actual_end: datetime | None = None


@dataclass(slots=True)
class ListTaskFilter:
    """
    Criteria narrowing a task listing.

    Every field is optional: "" / NONE / None means no constraint on that dimension.
    Timestamp bounds are inclusive.
    """

    name: str = ""
    status: TaskStatus = TaskStatus.NONE

    ctime_open: datetime | None = None
    ctime_close: datetime | None = None
    actual_start_open: datetime | None = None
    actual_start_close: datetime | None = None
    expected_end_open: datetime | None = None
    expected_end_close: datetime | None = None
    actual_end_open: datetime | None = None
    actual_end_close: datetime | None = None

    def is_empty(self) -> bool:
        return self == ListTaskFilter()

    def clear(self) -> None:
        """Reset every dimension in place."""
        empty = ListTaskFilter()
        for f in fields(self):
            setattr(self, f.name, getattr(empty, f.name))
