from pomo.errors import PomoError


class ColorError(PomoError):
    """Base exception for color parsing and palette storage."""


class InvalidColorFormatError(ColorError, ValueError):
    """Raised when a hex color string is not six hex digits."""


class PaletteNotFoundError(ColorError):
    """Raised when a named palette does not exist in the color store."""

    def __init__(self, name: str):
        super().__init__(f"Palette not found: {name}")
        self.name = name


class InvalidPaletteNameError(ColorError, ValueError):
    """Raised when a palette name cannot be used as a file name."""
