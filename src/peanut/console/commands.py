# src/peanut/console/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..core.state import ConsoleSession
from ..tasks.task_models import Task, TaskStatus
from ..tasks.task_store import TaskStoreError
from ..tasks.task_time import month_begin, parse_time, week_begin
from .formatter import render_task_page
from .navigation import Command, CommandKind, Page

CommandHandler = Callable[[ConsoleSession, Command], Page]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Maps a CommandKind to the handler that executes it and returns the next page."""

    def __init__(self) -> None:
        self._handlers: dict[CommandKind, CommandHandler] = {}

    def register(self, kind: CommandKind, handler: CommandHandler) -> None:
        self._handlers[kind] = handler

    def handle(self, session: ConsoleSession, command: Command) -> Page:
        """
        Execute `command` against `session` and return the page to show next.
        Commands without a handler keep the session where it is.
        """
        handler = self._handlers.get(command.kind)
        if handler is None:
            return session.page
        return handler(session, command)


# ---- list helpers ----


def show_list_page(session: ConsoleSession, page: int) -> list[Task]:
    """Query `page` with the active filter and print it. Store errors propagate."""
    tasks, total = session.task_repo.query(page, session.page_size, session.task_filter)
    session.emit(render_task_page(page, tasks, session.task_filter, total))
    return tasks


def _after_filter_change(session: ConsoleSession) -> Page:
    if session.reset_page_on_filter:
        session.list_page = 1
    show_list_page(session, session.list_page)
    return Page.LIST_TASKS


# ---- handlers ----


def cmd_goto_console(session: ConsoleSession, command: Command) -> Page:
    session.task_filter.clear()
    return Page.CONSOLE


def cmd_list_tasks(session: ConsoleSession, command: Command) -> Page:
    show_list_page(session, session.list_page)
    return Page.LIST_TASKS


def cmd_next_page(session: ConsoleSession, command: Command) -> Page:
    tasks, total = session.task_repo.query(
        session.list_page + 1, session.page_size, session.task_filter
    )
    # Soft bound: only move forward when the next page actually has rows.
    if tasks:
        session.list_page += 1
    else:
        logger.info("No more tasks, staying on page %d.", session.list_page)
    session.emit(render_task_page(session.list_page, tasks, session.task_filter, total))
    return Page.LIST_TASKS


def cmd_prev_page(session: ConsoleSession, command: Command) -> Page:
    if session.list_page > 1:
        session.list_page -= 1
    show_list_page(session, session.list_page)
    return Page.LIST_TASKS


def cmd_filter_name(session: ConsoleSession, command: Command) -> Page:
    session.task_filter.name = session.input.read_line("Filter by name:")
    return _after_filter_change(session)


def cmd_filter_status(session: ConsoleSession, command: Command) -> Page:
    raw = session.input.read_line("Filter by status [IN_PROGRESS | FINISHED | CANCELLED]:")
    session.task_filter.status = TaskStatus.parse(raw, TaskStatus.NONE)
    return _after_filter_change(session)


def cmd_filter_current_week(session: ConsoleSession, command: Command) -> Page:
    session.task_filter.actual_start_open = week_begin()
    return _after_filter_change(session)


def cmd_filter_current_month(session: ConsoleSession, command: Command) -> Page:
    session.task_filter.actual_start_open = month_begin()
    return _after_filter_change(session)


def task_from_input(session: ConsoleSession) -> Task:
    """Prompt for every field of a new task."""
    read = session.input.read_line

    name = read("Name:", required=True)
    status = TaskStatus.parse(
        read("Status [IN_PROGRESS | FINISHED | CANCELLED]:"), TaskStatus.IN_PROGRESS
    )
    now = datetime.now()
    actual_start = parse_time(read("Actual Start:"), now)
    expected_end = parse_time(read("Expected End:"), now)
    actual_end = parse_time(read("Actual End:"), now)

    return Task(
        id=0,
        name=name,
        status=status,
        ctime=now,
        actual_start=actual_start,
        expected_end=expected_end,
        actual_end=actual_end,
    )


def cmd_create_task(session: ConsoleSession, command: Command) -> Page:
    task = task_from_input(session)
    try:
        task_id = session.task_repo.insert(task)
    except (TaskStoreError, ValueError):
        # Recoverable: the session carries on, only the log shows what happened.
        logger.exception("Failed to save task name=%r", task.name)
    else:
        logger.info("Task created (id=%s).", task_id)
    return session.page


def cmd_not_available(session: ConsoleSession, command: Command) -> Page:
    # TODO: wire update/delete once TaskStore grows update()/delete() and the prompts are agreed on.
    logger.info("'%s' is not available yet.", command.kind.value)
    return session.page


def cmd_ignore(session: ConsoleSession, command: Command) -> Page:
    return session.page


def build_registry() -> CommandRegistry:
    reg = CommandRegistry()
    reg.register(CommandKind.IGNORE, cmd_ignore)
    reg.register(CommandKind.GOTO_CONSOLE, cmd_goto_console)
    reg.register(CommandKind.GOTO_LIST_TASKS, cmd_list_tasks)
    reg.register(CommandKind.CREATE_TASK, cmd_create_task)
    reg.register(CommandKind.GOTO_UPDATE_TASK, cmd_not_available)
    reg.register(CommandKind.GOTO_DELETE_TASK, cmd_not_available)
    reg.register(CommandKind.LIST_NEXT_PAGE, cmd_next_page)
    reg.register(CommandKind.LIST_PREV_PAGE, cmd_prev_page)
    reg.register(CommandKind.FILTER_NAME, cmd_filter_name)
    reg.register(CommandKind.FILTER_STATUS, cmd_filter_status)
    reg.register(CommandKind.FILTER_CURRENT_WEEK, cmd_filter_current_week)
    reg.register(CommandKind.FILTER_CURRENT_MONTH, cmd_filter_current_month)
    return reg


registry = build_registry()
