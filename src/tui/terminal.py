"""Full-screen terminal session and non-blocking key reader (POSIX terminals only)."""

from __future__ import annotations

import logging
import os
import select
import sys
import termios
import tty
from contextlib import ExitStack
from typing import Optional, TextIO

from rich.console import Console, RenderableType
from rich.live import Live

KEY_ESCAPE = "escape"

_ESC = b"\x1b"
_ESCAPE_SEQUENCE_WAIT_SECONDS = 0.02
_READ_CHUNK = 32


class TerminalError(Exception):
    """Raised when the terminal cannot be driven in full-screen mode."""


class TerminalSession:
    """Scoped cbreak input mode plus an alternate-screen `rich.live.Live`.

    Entering switches stdin to cbreak mode and the console to the alternate
    screen with a hidden cursor. Leaving restores both, in reverse order, on
    every exit path.
    """

    def __init__(
        self,
        *,
        console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._console = console or Console()
        self._stdin = stdin or sys.stdin
        self._logger = logger or logging.getLogger("tui")
        self._stack: Optional[ExitStack] = None
        self._live: Optional[Live] = None

    def __enter__(self) -> "TerminalSession":
        stack = ExitStack()
        try:
            fd = self._fileno()
            saved_attrs = termios.tcgetattr(fd)
            stack.callback(self._restore_input_mode, fd, saved_attrs)
            tty.setcbreak(fd)

            live = Live(
                console=self._console,
                screen=True,
                auto_refresh=False,
                transient=True,
            )
            stack.enter_context(live)
        except termios.error as error:
            stack.close()
            raise TerminalError(f"Failed to enter full-screen mode: {error}") from error
        except BaseException:
            stack.close()
            raise

        self._stack = stack
        self._live = live
        self._logger.debug("Terminal session started")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        stack, self._stack, self._live = self._stack, None, None
        if stack is not None:
            stack.close()
        self._logger.debug("Terminal session closed")

    def draw(self, renderable: RenderableType) -> None:
        if self._live is None:
            raise TerminalError("Terminal session is not active")
        self._live.update(renderable, refresh=True)

    def _fileno(self) -> int:
        try:
            fd = self._stdin.fileno()
        except (AttributeError, OSError, ValueError) as error:
            raise TerminalError("stdin has no file descriptor") from error
        if not os.isatty(fd):
            raise TerminalError("stdin is not a terminal")
        return fd

    def _restore_input_mode(self, fd: int, saved_attrs: list) -> None:
        try:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved_attrs)
        except termios.error as error:
            self._logger.error("Failed to restore terminal mode: %s", error)


class KeyReader:
    """Reads single key presses from stdin with a timeout.

    Returns the typed character, `KEY_ESCAPE` for a lone escape key, or
    `None` when nothing usable arrived. Escape sequences (arrow keys and
    friends) are consumed and dropped.
    """

    def __init__(self, stdin: Optional[TextIO] = None):
        self._stdin = stdin or sys.stdin

    def read_key(self, timeout: float) -> Optional[str]:
        fd = self._stdin.fileno()
        if not self._wait_readable(fd, timeout):
            return None

        data = os.read(fd, 1)
        if not data:
            raise TerminalError("stdin closed")

        if data == _ESC:
            if self._wait_readable(fd, _ESCAPE_SEQUENCE_WAIT_SECONDS):
                os.read(fd, _READ_CHUNK)
                return None
            return KEY_ESCAPE

        text = data.decode("utf-8", errors="ignore")
        return text or None

    @staticmethod
    def _wait_readable(fd: int, timeout: float) -> bool:
        ready, _, _ = select.select([fd], [], [], max(0.0, timeout))
        return bool(ready)
