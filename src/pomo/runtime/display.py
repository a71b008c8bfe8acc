"""ANSI terminal sink for the live countdown display."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from pomo.colors import ANSI_RESET
from pomo.pomodoro import Frame

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
RESET_SCREEN = "\033c"
CURSOR_UP_TWO = "\033[2A"
CURSOR_DOWN_TWO = "\033[2B"


class TerminalDisplay:
    """Draws the header once, then redraws the two countdown lines in place."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream or sys.stdout
        self._cursor_raised = False
        self._opened = False

    def open(self, header: str) -> None:
        self._write(f"{HIDE_CURSOR}{RESET_SCREEN}{header}{ANSI_RESET}\n")
        self._opened = True

    def show(self, frame: Frame, *, final: bool = False) -> None:
        text = f"{frame.countdown}\n{frame.bar}{ANSI_RESET}\n"
        if not final:
            text += CURSOR_UP_TWO
        self._cursor_raised = not final
        self._write(text)

    def close(self) -> None:
        if not self._opened:
            return
        # An interrupted run leaves the cursor on the countdown line.
        tail = CURSOR_DOWN_TWO if self._cursor_raised else ""
        self._write(f"{tail}{ANSI_RESET}{SHOW_CURSOR}")
        self._cursor_raised = False
        self._opened = False

    def _write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()
