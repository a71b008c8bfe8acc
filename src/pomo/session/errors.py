from pomo.errors import PomoError


class SessionError(PomoError):
    """Base exception for session registry and status snapshot handling."""


class NoActiveSessionError(SessionError):
    """Raised when no running timer session is recorded."""


class NoActiveTimerError(NoActiveSessionError):
    """Raised when no status snapshot has been published."""


class SessionTerminationError(SessionError):
    """Raised when the recorded session process cannot be signaled."""
