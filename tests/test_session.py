# tests/test_session.py

from __future__ import annotations

import pytest

from peanut.cli.bootstrap import bootstrap_steps, create_session, shutdown_steps
from peanut.console.input_reader import ConsoleInputError
from peanut.console.navigation import Page
from peanut.console.session import SessionError, run_console
from peanut.core.state import ConsoleSession
from peanut.tasks.task_store import TaskStore, TaskStoreError

from .fakes import FailingTaskRepo, FakeInput


def test_exit_runs_bootstrap_then_shutdown(settings, fake_input: FakeInput, caplog) -> None:
    session = create_session(settings=settings, input_reader=fake_input)
    fake_input.feed("0")

    with caplog.at_level("INFO"):
        run_console(
            session,
            on_bootstrap=bootstrap_steps(session),
            on_shutdown=shutdown_steps(session),
        )

    assert settings.db_path.exists()
    assert "Schema executed" in caplog.text
    assert "TaskStore ready" in caplog.text and "total=0" in caplog.text
    assert "Peanut test launched" in caplog.text
    assert "Bye!" in caplog.text


def test_menu_reads_use_keystrokes_when_enabled(session: ConsoleSession, fake_input: FakeInput) -> None:
    session.single_key_menus = True
    fake_input.feed("2", "name", "", "", "", "", "0")

    run_console(session)

    # menu, five create prompts, menu
    assert fake_input.modes == ["key", "line", "line", "line", "line", "line", "key"]


def test_full_round_trip(session: ConsoleSession, store: TaskStore, fake_input: FakeInput, output) -> None:
    fake_input.feed(
        "2", "Buy milk", "", "", "", "",  # create
        "1",  # list
        "0",  # back
        "0",  # exit
    )

    run_console(session)

    assert store.count_tasks() == 1
    assert any("Buy milk" in o for o in output)
    assert session.page is Page.CONSOLE


def test_bootstrap_failure_aborts_before_loop(fake_input: FakeInput) -> None:
    repo = FailingTaskRepo(fail_schema=True)
    session = ConsoleSession(task_repo=repo, input=fake_input)
    ran: list[str] = []

    with pytest.raises(TaskStoreError):
        run_console(
            session,
            on_bootstrap=bootstrap_steps(session),
            on_shutdown=[lambda: ran.append("shutdown")],
        )
    assert fake_input.prompts == []
    assert ran == []


def test_list_failure_is_fatal_by_default(fake_input: FakeInput) -> None:
    session = ConsoleSession(task_repo=FailingTaskRepo(), input=fake_input, emit=lambda _: None)
    fake_input.feed("1", "0")
    ran: list[str] = []

    with pytest.raises(SessionError, match="failed to list tasks"):
        run_console(session, on_shutdown=[lambda: ran.append("shutdown")])
    assert ran == ["shutdown"]


def test_list_failure_can_be_non_fatal(fake_input: FakeInput, caplog) -> None:
    repo = FailingTaskRepo()
    session = ConsoleSession(
        task_repo=repo,
        input=fake_input,
        list_errors_fatal=False,
        emit=lambda _: None,
    )
    fake_input.feed("1", "0")

    with caplog.at_level("ERROR"):
        run_console(session)

    assert repo.query_calls == 1
    assert session.page is Page.CONSOLE
    assert "Failed to load tasks" in caplog.text


def test_insert_failure_does_not_end_session(fake_input: FakeInput) -> None:
    session = ConsoleSession(task_repo=FailingTaskRepo(), input=fake_input, emit=lambda _: None)
    fake_input.feed("2", "X", "", "", "", "", "0")

    run_console(session)
    assert session.page is Page.CONSOLE


def test_input_eof_propagates(session: ConsoleSession) -> None:
    with pytest.raises(ConsoleInputError):
        run_console(session)
