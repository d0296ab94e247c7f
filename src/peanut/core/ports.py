# src/peanut/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the console.

Handlers depend on Protocols instead of concrete implementations.
This keeps the SQLite store and the terminal swappable and makes testing easier.
"""

from typing import Protocol

from ..tasks.task_models import ListTaskFilter, Task


class TaskRepo(Protocol):
    def create_schema(self) -> None: ...

    def insert(self, task: Task) -> int: ...

    def query(
            self,
            page: int,
            page_size: int,
            task_filter: ListTaskFilter | None = None,
    ) -> tuple[list[Task], int]: ...


class InputReader(Protocol):
    """Blocking terminal input: a whole line, or a single keystroke."""

    def read_line(self, prompt: str = "", *, required: bool = False) -> str: ...

    def read_key(self, prompt: str = "", *, required: bool = False) -> str: ...

    def read(self, prompt: str = "", *, single_key: bool = False, required: bool = False) -> str: ...
