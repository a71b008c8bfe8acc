"""Phase, mode, and rendering constants used by the countdown engine."""

from __future__ import annotations

BAR_LENGTH = 40
TICK_SECONDS = 1.0

FILLED_CELL = "█"
EMPTY_CELL = "░"

PHASE_IDLE = "idle"
PHASE_RUNNING = "running"
PHASE_COMPLETED = "completed"
PHASE_TERMINATED = "terminated"

TERMINAL_PHASES: frozenset[str] = frozenset({PHASE_COMPLETED, PHASE_TERMINATED})

MODE_POMODORO = "pomodoro"
MODE_BREAK = "break"

MODE_LABELS: dict[str, str] = {
    MODE_POMODORO: "Pomodoro",
    MODE_BREAK: "Break",
}

EXIT_COMPLETED = "completed"
EXIT_TERMINATED = "terminated"
