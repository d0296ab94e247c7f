# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from peanut.cli.bootstrap import create_session
from peanut.core.state import ConsoleSession
from peanut.tasks.task_store import TaskStore

from .fakes import FakeInput


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with create_session.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment / .env.
    """
    return SimpleNamespace(
        app_name="peanut",
        version="test",
        log_level="DEBUG",
        data_dir=tmp_path,
        db_path=tmp_path / "peanut.sqlite3",
        page_size=10,
        list_errors_fatal=True,
        reset_page_on_filter=False,
        single_key_menus=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    s = TaskStore(settings.db_path)
    s.create_schema()
    return s


@pytest.fixture()
def fake_input() -> FakeInput:
    return FakeInput()


@pytest.fixture()
def output() -> list[str]:
    return []


@pytest.fixture()
def session(
    settings: SimpleNamespace,
    store: TaskStore,
    fake_input: FakeInput,
    output: list[str],
) -> ConsoleSession:
    """
    Session wired with a real SQLite store and scripted input.
    Everything the handlers print ends up in `output`.
    """
    s = create_session(settings=settings, task_repo=store, input_reader=fake_input)
    s.emit = output.append
    return s
