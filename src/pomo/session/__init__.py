"""Public exports for the session registry and status snapshot."""

from .errors import (
    NoActiveSessionError,
    NoActiveTimerError,
    SessionError,
    SessionTerminationError,
)
from .registry import PID_FILE_NAME, SessionHandle, SessionRegistry, is_process_alive
from .status import STATUS_FILE_NAME, StatusPublisher

__all__ = [
    "NoActiveSessionError",
    "NoActiveTimerError",
    "PID_FILE_NAME",
    "STATUS_FILE_NAME",
    "SessionError",
    "SessionHandle",
    "SessionRegistry",
    "SessionTerminationError",
    "StatusPublisher",
    "is_process_alive",
]
