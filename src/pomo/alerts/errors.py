from pomo.errors import PomoError


class AlertError(PomoError):
    """Raised when a completion alert cannot be delivered."""
