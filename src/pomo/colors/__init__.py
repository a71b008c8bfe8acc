"""Public exports for color parsing and palette storage."""

from .errors import (
    ColorError,
    InvalidColorFormatError,
    InvalidPaletteNameError,
    PaletteNotFoundError,
)
from .rgb import ANSI_RESET, RGB, colorize
from .store import ColorStore, Palette, validate_palette_name

__all__ = [
    "ANSI_RESET",
    "RGB",
    "ColorError",
    "ColorStore",
    "InvalidColorFormatError",
    "InvalidPaletteNameError",
    "Palette",
    "PaletteNotFoundError",
    "colorize",
    "validate_palette_name",
]
