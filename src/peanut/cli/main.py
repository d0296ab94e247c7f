# src/peanut/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the ConsoleSession, then runs the console loop
in the main thread. Exit code 0 on a normal exit, 1 on a fatal error.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import bootstrap_steps, create_session, shutdown_steps
from ..config import get_settings
from ..console.input_reader import ConsoleInputError
from ..console.session import SessionError, run_console
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStoreError

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.debug("Starting %s %s (db=%s)", settings.app_name, settings.version, settings.db_path)

    session = create_session(settings=settings)

    try:
        run_console(
            session,
            on_bootstrap=bootstrap_steps(session),
            on_shutdown=shutdown_steps(session),
        )
    except KeyboardInterrupt:
        print()
        logger.info("Interrupted.")
    except (SessionError, ConsoleInputError, TaskStoreError) as e:
        logger.critical("Console encountered fatal error: %s", e)
        logger.debug("Fatal error details", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
