# src/peanut/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from ..console.navigation import Page
from ..tasks.task_models import ListTaskFilter
from .ports import InputReader, TaskRepo


def _print(text: str) -> None:
    print(text, flush=True)


@dataclass
class ConsoleSession:
    """
    Everything one interactive session needs.

    Handlers receive the session explicitly; nothing lives in module globals,
    so several sessions (or tests) can run side by side.
    """

    task_repo: TaskRepo
    input: InputReader

    page_size: int = 10
    list_errors_fatal: bool = True
    reset_page_on_filter: bool = False
    single_key_menus: bool = True

    app_name: str = "peanut"
    version: str = ""

    page: Page = Page.CONSOLE
    list_page: int = 1
    task_filter: ListTaskFilter = field(default_factory=ListTaskFilter)

    # Where user-facing output (tables, notices) goes.
    emit: Callable[[str], None] = _print
