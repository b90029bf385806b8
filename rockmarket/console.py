"""Token-based terminal input and output used by the interactive menus."""

from __future__ import annotations

import sys
import time
from collections import deque
from typing import Callable, TextIO

_CLEAR_SEQUENCE = "\033[2J\033[H"


class Console:
    """Reads whitespace-separated tokens and writes text, like a terminal session."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clear_screen: bool | None = None,
    ) -> None:
        self._input = stdin if stdin is not None else sys.stdin
        self._output = stdout if stdout is not None else sys.stdout
        self._sleep = sleep
        if clear_screen is None:
            isatty = getattr(self._output, "isatty", None)
            clear_screen = bool(isatty and isatty())
        self._clear_screen = clear_screen
        self._pending: deque[str] = deque()

    def read_token(self) -> str:
        """Return the next whitespace-separated word; raise EOFError at end of input."""
        while not self._pending:
            line = self._input.readline()
            if not line:
                raise EOFError("no more input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def read_int(self) -> int:
        """Return the next word as an integer; raise ValueError if it is not one."""
        return int(self.read_token())

    def read_float(self) -> float:
        """Return the next word as a number; raise ValueError if it is not one."""
        return float(self.read_token())

    def write(self, text: str) -> None:
        """Write text exactly as given."""
        self._output.write(text)
        self._output.flush()

    def pause(self, seconds: float) -> None:
        """Wait for the given number of seconds."""
        self._sleep(seconds)

    def wait_enter(self) -> None:
        """Drop the rest of the current line, then wait for one more line."""
        self._pending.clear()
        self._input.readline()

    def clear(self) -> None:
        """Clear the screen when writing to a terminal."""
        if self._clear_screen:
            self.write(_CLEAR_SEQUENCE)