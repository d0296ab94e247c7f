# tests/fakes.py

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from peanut.console.input_reader import ConsoleInputError
from peanut.tasks.task_models import ListTaskFilter, Task
from peanut.tasks.task_store import TaskStoreError


class FakeInput:
    """
    Scripted InputReader.

    - Answers are consumed in order regardless of mode
    - Prompts are captured for assertions
    - Running out of answers behaves like EOF on stdin
    """

    def __init__(self, answers: Iterable[str] = ()) -> None:
        self.answers: deque[str] = deque(answers)
        self.prompts: list[str] = []
        self.modes: list[str] = []

    def feed(self, *answers: str) -> None:
        self.answers.extend(answers)

    def _next(self, prompt: str, required: bool) -> str:
        self.prompts.append(prompt)
        while self.answers:
            text = self.answers.popleft().strip()
            if text or not required:
                return text
        raise ConsoleInputError("failed to read from console: EOF")

    def read_line(self, prompt: str = "", *, required: bool = False) -> str:
        self.modes.append("line")
        return self._next(prompt, required)

    def read_key(self, prompt: str = "", *, required: bool = False) -> str:
        self.modes.append("key")
        return self._next(prompt, required)

    def read(self, prompt: str = "", *, single_key: bool = False, required: bool = False) -> str:
        if single_key:
            return self.read_key(prompt, required=required)
        return self.read_line(prompt, required=required)


class FailingTaskRepo:
    """TaskRepo whose statements all fail, like a locked or corrupt database."""

    def __init__(self, *, fail_schema: bool = False) -> None:
        self.fail_schema = fail_schema
        self.query_calls = 0

    def create_schema(self) -> None:
        if self.fail_schema:
            raise TaskStoreError("failed to execute schema: disk I/O error")

    def insert(self, task: Task) -> int:
        raise TaskStoreError("failed to save task: database is locked")

    def query(
        self,
        page: int,
        page_size: int,
        task_filter: ListTaskFilter | None = None,
    ) -> tuple[list[Task], int]:
        self.query_calls += 1
        raise TaskStoreError("failed to list tasks: database is locked")
