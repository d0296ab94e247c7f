# src/peanut/console/navigation.py

"""
Console navigation: which page we are on, what the user typed, what to do next.

`parse_command` is pure: the same (page, input) always yields the same Command.
Side effects live in `console.commands`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .formatter import render_menu


class Page(Enum):
    CONSOLE = 1
    LIST_TASKS = 2


class CommandKind(Enum):
    EXIT = "exit"
    IGNORE = "ignore"

    GOTO_CONSOLE = "goto_console"
    GOTO_LIST_TASKS = "goto_list_tasks"
    CREATE_TASK = "create_task"
    # Menu entries exist, handlers are placeholders.
    GOTO_UPDATE_TASK = "goto_update_task"
    GOTO_DELETE_TASK = "goto_delete_task"

    LIST_PREV_PAGE = "list_prev_page"
    LIST_NEXT_PAGE = "list_next_page"
    FILTER_NAME = "filter_name"
    FILTER_STATUS = "filter_status"
    FILTER_CURRENT_WEEK = "filter_current_week"
    FILTER_CURRENT_MONTH = "filter_current_month"


@dataclass(slots=True, frozen=True)
class Command:
    kind: CommandKind


@dataclass(slots=True, frozen=True)
class Menu:
    text: str
    single_key: bool


_CONSOLE_COMMANDS: dict[str, CommandKind] = {
    "0": CommandKind.EXIT,
    "1": CommandKind.GOTO_LIST_TASKS,
    "2": CommandKind.CREATE_TASK,
    "3": CommandKind.GOTO_UPDATE_TASK,
    "4": CommandKind.GOTO_DELETE_TASK,
}

_LIST_TASKS_COMMANDS: dict[str, CommandKind] = {
    "0": CommandKind.GOTO_CONSOLE,
    "1": CommandKind.LIST_PREV_PAGE,
    "2": CommandKind.LIST_NEXT_PAGE,
    "3": CommandKind.FILTER_NAME,
    "4": CommandKind.FILTER_STATUS,
    "5": CommandKind.FILTER_CURRENT_WEEK,
    "6": CommandKind.FILTER_CURRENT_MONTH,
}

CONSOLE_OPTIONS = [
    "Exit",
    "List Tasks",
    "Create Task",
    "Update Task",
    "Delete Task",
]

LIST_TASKS_OPTIONS = [
    "Back",
    "Prev Page",
    "Next Page",
    "Filter Name",
    "Filter Status",
    "Filter Current Week",
    "Filter Current Month",
]

MENU_TITLE = "What to do next?"


def parse_command(page: Page, raw: str) -> Command:
    key = (raw or "").strip()

    if page is Page.CONSOLE:
        kind = _CONSOLE_COMMANDS.get(key)
        if kind is not None:
            return Command(kind)
        return Command(CommandKind.IGNORE)

    if page is Page.LIST_TASKS:
        # Anything unrecognised on the list page simply reloads it.
        return Command(_LIST_TASKS_COMMANDS.get(key, CommandKind.GOTO_LIST_TASKS))

    return Command(CommandKind.IGNORE)


def menu_for(page: Page) -> Menu:
    """Menu text for `page`. All menus are single-digit choices, so a keystroke is enough."""
    if page is Page.LIST_TASKS:
        return Menu(text=render_menu(MENU_TITLE, LIST_TASKS_OPTIONS), single_key=True)
    return Menu(text=render_menu(MENU_TITLE, CONSOLE_OPTIONS), single_key=True)
