# src/peanut/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the SQLite store and the terminal reader into a ConsoleSession,
- lists the startup / shutdown steps the console runs, in order.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..console.input_reader import TerminalInput
from ..console.session import LifecycleStep
from ..core.ports import InputReader, TaskRepo
from ..core.state import ConsoleSession
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def create_session(
    *,
    settings=None,
    task_repo: TaskRepo | None = None,
    input_reader: InputReader | None = None,
) -> ConsoleSession:
    """
    Create a ConsoleSession from the provided settings.

    Keeping settings and collaborators injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if task_repo is None:
        _ensure_local_dirs(settings)
        task_repo = TaskStore(settings.db_path)

    return ConsoleSession(
        task_repo=task_repo,
        input=input_reader if input_reader is not None else TerminalInput(),
        page_size=settings.page_size,
        list_errors_fatal=settings.list_errors_fatal,
        reset_page_on_filter=settings.reset_page_on_filter,
        single_key_menus=settings.single_key_menus,
        app_name=settings.app_name,
        version=settings.version,
    )


def bootstrap_steps(session: ConsoleSession) -> list[LifecycleStep]:
    return [session.task_repo.create_schema]


def shutdown_steps(session: ConsoleSession) -> list[LifecycleStep]:
    def _farewell() -> None:
        logger.info("Bye!")

    return [_farewell]
