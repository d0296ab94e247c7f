# src/peanut/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

# SQL tracing lives here; it belongs in the log file, not between menus.
_STORE_LOGGER = "peanut.tasks.task_store"


class _ConsoleFilter(logging.Filter):
    """Console gets peanut's own messages; SQL debug lines and foreign loggers need ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(_STORE_LOGGER):
            return record.levelno >= logging.INFO
        if record.name.startswith("peanut."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/peanut",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Send short messages to stderr (shared with the menus) and a timestamped
    full trace to `<log_dir>/peanut.log`. Call once, before the first log call.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter("%(message)s"))
    console.addFilter(_ConsoleFilter())
    root.addHandler(console)

    log_file = logging.FileHandler(str(log_dir / "peanut.log"), encoding="utf-8")
    log_file.setLevel(file_level)
    log_file.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(log_file)

    logging.captureWarnings(True)
