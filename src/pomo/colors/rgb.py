"""RGB color values, hex parsing, and ANSI true-color escapes."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import InvalidColorFormatError

_HEX_COLOR_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")

ANSI_RESET = "\033[0m"


@dataclass(frozen=True)
class RGB:
    """24-bit color with one byte per channel."""
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise InvalidColorFormatError(
                    f"Color channel out of range [0, 255]: {channel}"
                )

    @classmethod
    def from_hex(cls, value: str) -> "RGB":
        """Parse `#RRGGBB` or `RRGGBB` (any case)."""
        match = _HEX_COLOR_PATTERN.match(value.strip()) if value else None
        if match is None:
            raise InvalidColorFormatError(f"Expected #RRGGBB color, got: {value!r}")
        digits = match.group(1)
        return cls(
            r=int(digits[0:2], 16),
            g=int(digits[2:4], 16),
            b=int(digits[4:6], 16),
        )

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def ansi_fg(self) -> str:
        return f"\033[38;2;{self.r};{self.g};{self.b}m"

    def __str__(self) -> str:
        return self.to_hex()


def colorize(text: str, color: RGB) -> str:
    return f"{color.ansi_fg()}{text}"
