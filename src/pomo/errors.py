class PomoError(Exception):
    """Base exception for pomo components."""
