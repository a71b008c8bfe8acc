"""Public exports for completion alerts."""

from .errors import AlertError
from .notifier import DesktopNotifier
from .service import CompletionAlertService

__all__ = [
    "AlertError",
    "CompletionAlertService",
    "DesktopNotifier",
]
