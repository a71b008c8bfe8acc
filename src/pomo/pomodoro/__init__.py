from .constants import BAR_LENGTH, EXIT_COMPLETED, EXIT_TERMINATED, MODE_BREAK, MODE_POMODORO
from .render import Frame, countdown_text, render_frame
from .service import (
    CountdownMode,
    CountdownPhase,
    CountdownSnapshot,
    CountdownTick,
    CountdownTimer,
    TimerStateError,
)

__all__ = [
    "BAR_LENGTH",
    "EXIT_COMPLETED",
    "EXIT_TERMINATED",
    "MODE_BREAK",
    "MODE_POMODORO",
    "CountdownMode",
    "CountdownPhase",
    "CountdownSnapshot",
    "CountdownTick",
    "CountdownTimer",
    "Frame",
    "TimerStateError",
    "countdown_text",
    "render_frame",
]
