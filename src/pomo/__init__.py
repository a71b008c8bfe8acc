"""Terminal pomodoro timer with color palettes and cross-process status."""

__version__ = "1.0.0"
