# src/peanut/console/session.py

"""
The interactive read-eval loop.

Startup and teardown are explicit ordered step lists handed in by the caller
(see cli.bootstrap), not hooks registered as an import side effect.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..core.state import ConsoleSession
from ..tasks.task_store import TaskStoreError
from .commands import CommandRegistry, registry as default_registry
from .navigation import CommandKind, menu_for, parse_command

LifecycleStep = Callable[[], None]

logger = logging.getLogger(__name__)


class SessionError(RuntimeError):
    """A command failed in a way that ends the session (the cause is chained)."""


def run_steps(steps: Sequence[LifecycleStep]) -> None:
    """Run lifecycle steps in order; the first failure propagates."""
    for step in steps:
        step()


def step_once(session: ConsoleSession, registry: CommandRegistry) -> bool:
    """
    Show the menu, read one choice and execute it.
    Returns False when the user asked to exit.
    """
    menu = menu_for(session.page)
    raw = session.input.read(
        "\n" + menu.text,
        single_key=menu.single_key and session.single_key_menus,
        required=True,
    )
    command = parse_command(session.page, raw)
    if command.kind is CommandKind.EXIT:
        return False

    try:
        session.page = registry.handle(session, command)
    except TaskStoreError as e:
        # Insert failures never get here (the create handler swallows them),
        # so this is a failed list query.
        if session.list_errors_fatal:
            raise SessionError(f"failed to execute command {command.kind.value}: {e}") from e
        logger.error("Failed to load tasks: %s", e)
    except (ValueError, RuntimeError) as e:
        raise SessionError(f"failed to execute command {command.kind.value}: {e}") from e
    return True


def run_console(
    session: ConsoleSession,
    *,
    on_bootstrap: Sequence[LifecycleStep] = (),
    on_shutdown: Sequence[LifecycleStep] = (),
    registry: CommandRegistry | None = None,
) -> None:
    """
    Run bootstrap steps, then loop until the user exits, then run shutdown steps.

    Bootstrap failures propagate before the loop starts. Shutdown steps run
    even when the loop ends with an error.
    """
    reg = registry if registry is not None else default_registry

    run_steps(on_bootstrap)
    logger.info("%s %s launched", session.app_name.capitalize(), session.version)

    try:
        while step_once(session, reg):
            pass
    finally:
        run_steps(on_shutdown)

