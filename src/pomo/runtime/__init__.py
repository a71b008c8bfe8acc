"""Runtime exports for timer runs and one-shot commands."""

from .commands import CommandContext
from .display import TerminalDisplay
from .loop import RuntimeBootstrap, TimerRuntime
from .ticks import TickDependencies, TickProcessor

__all__ = [
    "CommandContext",
    "RuntimeBootstrap",
    "TerminalDisplay",
    "TickDependencies",
    "TickProcessor",
    "TimerRuntime",
]
