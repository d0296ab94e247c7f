# src/peanut/console/input_reader.py

from __future__ import annotations

import contextlib
import logging
import os
import sys
import termios
import tty
from collections.abc import Iterator
from typing import TextIO

logger = logging.getLogger(__name__)


class ConsoleInputError(RuntimeError):
    """Reading from the terminal failed (EOF, closed stdin, termios failure)."""


@contextlib.contextmanager
def raw_mode(fd: int) -> Iterator[None]:
    """
    Put the terminal behind `fd` into raw (unbuffered, no echo) mode for the block.

    The previous attributes are restored on every exit path, otherwise the
    shell left behind after peanut would be unusable.
    """
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


class TerminalInput:
    """Blocking stdin reader used by the console (implements core.ports.InputReader)."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def is_tty(self) -> bool:
        try:
            return self._stdin.isatty()
        except (AttributeError, ValueError):
            return False

    def _prompt(self, prompt: str) -> None:
        if prompt:
            self._stdout.write(prompt if prompt.endswith("\n") else prompt + "\n")
            self._stdout.flush()

    def read_line(self, prompt: str = "", *, required: bool = False) -> str:
        self._prompt(prompt)
        while True:
            try:
                line = self._stdin.readline()
            except (OSError, ValueError) as e:
                raise ConsoleInputError(f"failed to read from console: {e}") from e
            if line == "":
                raise ConsoleInputError("failed to read from console: EOF")

            text = line.strip()
            if text or not required:
                return text

    def read_key(self, prompt: str = "", *, required: bool = False) -> str:
        self._prompt(prompt)
        try:
            fd = self._stdin.fileno()
        except (OSError, ValueError, AttributeError) as e:
            raise ConsoleInputError(f"failed to switch stdin to raw mode: {e}") from e

        while True:
            try:
                with raw_mode(fd):
                    b = os.read(fd, 1)
            except (OSError, termios.error) as e:
                raise ConsoleInputError(f"failed to read from console: {e}") from e
            if not b:
                raise ConsoleInputError("failed to read from console: EOF")

            # Ctrl+C / Ctrl+D arrive as plain bytes in raw mode.
            if b in (b"\x03", b"\x04"):
                raise KeyboardInterrupt

            text = b.decode("utf-8", errors="replace").strip()
            if text or not required:
                return text

    def read(self, prompt: str = "", *, single_key: bool = False, required: bool = False) -> str:
        """Read in the requested mode; single keystrokes need a real TTY, fall back to lines."""
        if single_key and self.is_tty():
            return self.read_key(prompt, required=required)
        if single_key:
            logger.debug("stdin is not a TTY, reading a full line instead of a keystroke.")
        return self.read_line(prompt, required=required)
