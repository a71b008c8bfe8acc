"""Frame rendering: header, two-tone countdown line, and progress bar."""

from __future__ import annotations

from dataclasses import dataclass

from pomo.colors import ANSI_RESET, RGB, colorize

from .constants import BAR_LENGTH, EMPTY_CELL, FILLED_CELL
from .service import CountdownSnapshot

CLEAR_LINE = "\033[2K"


@dataclass(frozen=True)
class Frame:
    """One fully rendered display frame, color escapes included."""
    header: str
    countdown: str
    bar: str

    @property
    def text(self) -> str:
        return f"{self.header}\n{self.countdown}\n{self.bar}{ANSI_RESET}\n"


def countdown_text(snapshot: CountdownSnapshot) -> str:
    return (
        f"{snapshot.duration_minutes} minute(s) - "
        f"{snapshot.minutes}m{snapshot.seconds}s"
    )


def render_header(snapshot: CountdownSnapshot, *, color1: RGB, color2: RGB) -> str:
    return (
        colorize(f"{snapshot.label}: ", color1)
        + colorize(f"{snapshot.start_label} - {snapshot.end_label}", color2)
    )


def render_countdown_line(
    snapshot: CountdownSnapshot, *, color1: RGB, color2: RGB
) -> str:
    """Digits in the accent color, everything else in the text color."""
    parts = [CLEAR_LINE]
    current = None
    for char in countdown_text(snapshot):
        color = color2 if char.isdigit() else color1
        if color != current:
            parts.append(color.ansi_fg())
            current = color
        parts.append(char)
    return "".join(parts)


def render_progress_bar(filled: int, *, color1: RGB, color2: RGB) -> str:
    filled = max(0, min(BAR_LENGTH, filled))
    return (
        CLEAR_LINE
        + colorize(FILLED_CELL * filled, color2)
        + colorize(EMPTY_CELL * (BAR_LENGTH - filled), color1)
    )


def render_frame(snapshot: CountdownSnapshot, *, color1: RGB, color2: RGB) -> Frame:
    return Frame(
        header=render_header(snapshot, color1=color1, color2=color2),
        countdown=render_countdown_line(snapshot, color1=color1, color2=color2),
        bar=render_progress_bar(snapshot.filled_cells, color1=color1, color2=color2),
    )
