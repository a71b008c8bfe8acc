"""Tick handling: render each countdown tick and mirror it to the status file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from pomo.colors import RGB
from pomo.pomodoro import CountdownSnapshot, CountdownTick, Frame, render_frame
from pomo.pomodoro.render import render_header
from pomo.session import StatusPublisher

from .display import TerminalDisplay


@dataclass(frozen=True)
class TickDependencies:
    """Sinks and palette needed to present countdown ticks."""
    display: TerminalDisplay
    color1: RGB
    color2: RGB
    logger: logging.Logger
    status: Optional[StatusPublisher] = None


class TickProcessor:
    """Renders one frame per tick for the terminal and, when tracking, the snapshot."""
    def __init__(self, dependencies: TickDependencies):
        self._dependencies = dependencies

    @property
    def tracking(self) -> bool:
        return self._dependencies.status is not None

    def begin(self, snapshot: CountdownSnapshot) -> None:
        deps = self._dependencies
        deps.display.open(
            render_header(snapshot, color1=deps.color1, color2=deps.color2)
        )

    def handle_tick(self, tick: CountdownTick) -> Frame:
        deps = self._dependencies
        frame = render_frame(tick.snapshot, color1=deps.color1, color2=deps.color2)
        deps.display.show(frame, final=tick.completed)
        if deps.status is not None:
            deps.status.publish(frame.text)
        if tick.completed:
            deps.logger.debug("Rendered final frame")
        return frame

    def close(self) -> None:
        self._dependencies.display.close()
