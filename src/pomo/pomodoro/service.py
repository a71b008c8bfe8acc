"""Single-run countdown state machine with fixed one-second ticks."""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Iterator, Literal, Optional

from pomo.errors import PomoError

from .constants import (
    BAR_LENGTH,
    MODE_LABELS,
    MODE_POMODORO,
    PHASE_COMPLETED,
    PHASE_IDLE,
    PHASE_RUNNING,
    PHASE_TERMINATED,
)

CountdownPhase = Literal["idle", "running", "completed", "terminated"]
CountdownMode = Literal["pomodoro", "break"]

CLOCK_LABEL_FORMAT = "%H:%M"


class TimerStateError(PomoError):
    """Raised when a countdown transition is not valid in the current phase."""


@dataclass(frozen=True)
class CountdownSnapshot:
    """Immutable countdown state handed to renderers and publishers."""
    phase: CountdownPhase
    mode: CountdownMode
    duration_minutes: int
    remaining_seconds: int
    start_label: str = ""
    end_label: str = ""

    @property
    def total_seconds(self) -> int:
        return self.duration_minutes * 60

    @property
    def elapsed_seconds(self) -> int:
        return self.total_seconds - self.remaining_seconds

    @property
    def minutes(self) -> int:
        return self.remaining_seconds // 60

    @property
    def seconds(self) -> int:
        return self.remaining_seconds % 60

    @property
    def filled_cells(self) -> int:
        # Truncates so the bar is only full when nothing remains.
        return self.elapsed_seconds * BAR_LENGTH // self.total_seconds

    @property
    def label(self) -> str:
        return MODE_LABELS.get(self.mode, MODE_LABELS[MODE_POMODORO])


@dataclass(frozen=True)
class CountdownTick:
    """Tick payload emitted once per second of countdown."""
    snapshot: CountdownSnapshot
    completed: bool = False


class CountdownTimer:
    """Countdown for one pomodoro or break run: idle, running, then done."""

    def __init__(
        self,
        *,
        duration_minutes: int,
        mode: CountdownMode = "pomodoro",
        logger: Optional[logging.Logger] = None,
    ):
        if int(duration_minutes) < 1:
            raise ValueError("duration_minutes must be at least 1")
        if mode not in MODE_LABELS:
            raise ValueError(f"unknown countdown mode: {mode}")

        self._duration_minutes = int(duration_minutes)
        self._total_seconds = self._duration_minutes * 60
        self._mode: CountdownMode = mode
        self._logger = logger or logging.getLogger("pomo.timer")

        self._phase: CountdownPhase = PHASE_IDLE
        self._remaining_seconds = self._total_seconds
        self._start_label = ""
        self._end_label = ""

    @property
    def phase(self) -> CountdownPhase:
        return self._phase

    @property
    def total_seconds(self) -> int:
        return self._total_seconds

    def snapshot(self) -> CountdownSnapshot:
        return CountdownSnapshot(
            phase=self._phase,
            mode=self._mode,
            duration_minutes=self._duration_minutes,
            remaining_seconds=self._remaining_seconds,
            start_label=self._start_label,
            end_label=self._end_label,
        )

    def start(self, now: Optional[dt.datetime] = None) -> CountdownSnapshot:
        if self._phase != PHASE_IDLE:
            raise TimerStateError(f"cannot start countdown in phase {self._phase}")

        started_at = now or dt.datetime.now()
        ends_at = started_at + dt.timedelta(seconds=self._total_seconds)
        self._start_label = started_at.strftime(CLOCK_LABEL_FORMAT)
        self._end_label = ends_at.strftime(CLOCK_LABEL_FORMAT)
        self._remaining_seconds = self._total_seconds
        self._phase = PHASE_RUNNING
        self._logger.info(
            "Countdown started: mode=%s duration=%ss ends=%s",
            self._mode,
            self._total_seconds,
            self._end_label,
        )
        return self.snapshot()

    def ticks(self) -> Iterator[CountdownTick]:
        """Yield one tick per remaining second, from the full duration down to zero."""
        if self._phase != PHASE_RUNNING:
            raise TimerStateError(f"cannot tick countdown in phase {self._phase}")

        for remaining in range(self._total_seconds, -1, -1):
            if self._phase != PHASE_RUNNING:
                return
            self._remaining_seconds = remaining
            if remaining == 0:
                self._phase = PHASE_COMPLETED
                self._logger.info("Countdown completed: mode=%s", self._mode)
                yield CountdownTick(snapshot=self.snapshot(), completed=True)
                return
            yield CountdownTick(snapshot=self.snapshot(), completed=False)

    def terminate(self) -> CountdownSnapshot:
        if self._phase == PHASE_RUNNING:
            self._phase = PHASE_TERMINATED
            self._logger.info(
                "Countdown terminated: mode=%s remaining=%ss",
                self._mode,
                self._remaining_seconds,
            )
        return self.snapshot()
