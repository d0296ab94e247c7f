# tests/test_task_time.py

from __future__ import annotations

from datetime import datetime

import pytest

from peanut.tasks.task_models import ListTaskFilter, TaskStatus
from peanut.tasks.task_time import format_time, from_db, month_begin, parse_time, to_db, week_begin

NOW = datetime(2024, 6, 5, 14, 30, 15)  # a Wednesday


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("2024-01-02 03:04:05", datetime(2024, 1, 2, 3, 4, 5)),
        ("2024/01/02 03:04:05", datetime(2024, 1, 2, 3, 4, 5)),
        ("2024-01-02", datetime(2024, 1, 2)),
        ("2024/01/02", datetime(2024, 1, 2)),
        ("  2024-01-02  ", datetime(2024, 1, 2)),
    ],
)
def test_parse_time_accepts_known_formats(text: str, expected: datetime) -> None:
    assert parse_time(text, NOW) == expected


def test_parse_time_blank_is_absent() -> None:
    assert parse_time("", NOW) is None
    assert parse_time("   ", NOW) is None
    assert parse_time(None, NOW) is None


def test_parse_time_garbage_means_now() -> None:
    assert parse_time("not-a-date", NOW) == NOW
    # Unpadded fields do not match the literal formats.
    assert parse_time("2024-1-2", NOW) == NOW
    assert parse_time("2024/1/2 3:4:5", NOW) == NOW
    assert parse_time("2024-01-02 3:04:05", NOW) == NOW

    before = datetime.now()
    got = parse_time("tomorrow-ish")
    assert got is not None and got >= before


def test_week_begin_on_wednesday_is_monday_same_time() -> None:
    assert week_begin(NOW) == datetime(2024, 6, 3, 14, 30, 15)


def test_week_begin_on_monday_and_sunday() -> None:
    monday = datetime(2024, 6, 3, 8, 0, 0)
    sunday = datetime(2024, 6, 9, 8, 0, 0)
    assert week_begin(monday) == monday
    assert week_begin(sunday) == datetime(2024, 6, 3, 8, 0, 0)


def test_month_begin_keeps_time_of_day() -> None:
    assert month_begin(NOW) == datetime(2024, 6, 1, 14, 30, 15)
    first = datetime(2024, 6, 1, 0, 0, 1)
    assert month_begin(first) == first


def test_storage_format_sorts_chronologically() -> None:
    a = datetime(2024, 1, 2, 0, 0, 0)
    b = datetime(2024, 1, 2, 0, 0, 0, 1)
    assert to_db(a) < to_db(b)  # type: ignore[operator]
    assert from_db(to_db(b)) == b
    assert from_db(None) is None
    assert format_time(None) == ""


def test_status_parse_and_filter_clear() -> None:
    assert TaskStatus.parse("finished", TaskStatus.NONE) is TaskStatus.FINISHED
    assert TaskStatus.parse(" In_Progress ", TaskStatus.NONE) is TaskStatus.IN_PROGRESS
    assert TaskStatus.parse("done", TaskStatus.IN_PROGRESS) is TaskStatus.IN_PROGRESS
    assert TaskStatus.parse("NONE", TaskStatus.CANCELLED) is TaskStatus.CANCELLED

    f = ListTaskFilter(name="x", status=TaskStatus.FINISHED, actual_end_close=NOW)
    assert not f.is_empty()
    f.clear()
    assert f.is_empty()
