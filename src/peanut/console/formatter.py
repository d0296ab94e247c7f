# src/peanut/console/formatter.py

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_models import ListTaskFilter, Task, TaskStatus
from ..tasks.task_time import format_time

TASK_COLUMNS = [
    "Id",
    "Name",
    "Status",
    "Create Time",
    "Actual Start",
    "Expected End",
    "Actual End",
]

_STATUS_LABELS: dict[int, str] = {
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.FINISHED: "Finished",
    TaskStatus.CANCELLED: "Cancelled",
}


def status_label(status: int) -> str:
    return _STATUS_LABELS.get(status, "Unknown")


def str_width(s: str) -> int:
    # Character count; wide (CJK) glyphs are not accounted for.
    return len(s)


def column_widths(columns: Sequence[str], rows: Sequence[Sequence[str]]) -> list[int]:
    widths = [str_width(c) for c in columns]
    for row in rows:
        for i in range(len(columns)):
            widths[i] = max(widths[i], str_width(row[i]))
    return widths


def _line(cells: Sequence[str], widths: Sequence[int]) -> str:
    out = "| "
    for cell, w in zip(cells, widths):
        out += cell + " " * (w - str_width(cell) + 1) + " | "
    return out


def _separator(widths: Sequence[int]) -> str:
    parts = ["-" * (w + 1) + "-|" for w in widths]
    return "|-" + "-".join(parts)


def render_table(columns: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """
    Render rows as a bordered, left-aligned text table:

        |-----|-------|
        | Id  | Name  |
        |-----|-------|
        | 1   | Bob   |
        |-----|-------|
    """
    widths = column_widths(columns, rows)
    sep = _separator(widths)

    lines = [sep, _line(columns, widths), sep]
    lines.extend(_line(row, widths) for row in rows)
    lines.append(sep)
    return "\n".join(lines)


def render_menu(title: str, options: Sequence[str]) -> str:
    lines = [title, ""]
    lines.extend(f" {i}. {opt}" for i, opt in enumerate(options))
    lines.append("")
    return "\n".join(lines) + "\n"


def task_to_row(task: Task) -> list[str]:
    return [
        str(task.id),
        task.name,
        status_label(task.status),
        format_time(task.ctime),
        format_time(task.actual_start),
        format_time(task.expected_end),
        format_time(task.actual_end),
    ]


def describe_filter(task_filter: ListTaskFilter) -> list[str]:
    """One human-readable line per active filter dimension."""
    out: list[str] = []
    if task_filter.name:
        out.append(f"Filtered: name like '{task_filter.name}'")
    if task_filter.status > TaskStatus.NONE:
        out.append(f"Filtered: status is '{status_label(task_filter.status)}'")

    bounds = (
        ("create time", task_filter.ctime_open, task_filter.ctime_close),
        ("actual start", task_filter.actual_start_open, task_filter.actual_start_close),
        ("expected end", task_filter.expected_end_open, task_filter.expected_end_close),
        ("actual end", task_filter.actual_end_open, task_filter.actual_end_close),
    )
    for label, open_, close in bounds:
        if open_ is not None:
            out.append(f"Filtered: {label} >= '{format_time(open_)}'")
        if close is not None:
            out.append(f"Filtered: {label} <= '{format_time(close)}'")
    return out


def render_task_page(
    page: int,
    tasks: Sequence[Task],
    task_filter: ListTaskFilter,
    total: int,
) -> str:
    lines = [render_table(TASK_COLUMNS, [task_to_row(t) for t in tasks]), ""]
    lines.append(f"Total: {total}")
    lines.append(f"Page:  {page}")
    lines.extend(describe_filter(task_filter))
    lines.append("")
    return "\n".join(lines)
