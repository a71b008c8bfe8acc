"""Dataclass schema objects and defaults for the persisted user config."""

from __future__ import annotations

from dataclasses import dataclass

from pomo.colors import RGB
from pomo.errors import PomoError

CONFIG_FILE_NAME = "config"
APP_DIR_NAME = "pomo"

DEFAULT_POMODORO_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5
DEFAULT_COLOR1 = RGB(0xFF, 0xFF, 0xFF)
DEFAULT_COLOR2 = RGB(0x00, 0xCC, 0xFF)

KEY_COLOR1 = "COLOR1"
KEY_COLOR2 = "COLOR2"
KEY_POMODORO_MINUTES = "POMO_MIN"
KEY_BREAK_MINUTES = "BREAK_MIN"


class ConfigUnreadableError(PomoError):
    """Raised when the config file exists but cannot be read."""


@dataclass(frozen=True)
class PomoConfig:
    """Durable user preferences: session lengths and the active palette."""
    pomodoro_minutes: int = DEFAULT_POMODORO_MINUTES
    break_minutes: int = DEFAULT_BREAK_MINUTES
    color1: RGB = DEFAULT_COLOR1
    color2: RGB = DEFAULT_COLOR2


@dataclass(frozen=True)
class ConfigField:
    """One `KEY=VALUE` line of the config file and the attribute it fills."""
    key: str
    attribute: str
    kind: str


# Serialization order of the config file.
CONFIG_FIELDS: tuple[ConfigField, ...] = (
    ConfigField(key=KEY_COLOR1, attribute="color1", kind="color"),
    ConfigField(key=KEY_COLOR2, attribute="color2", kind="color"),
    ConfigField(key=KEY_POMODORO_MINUTES, attribute="pomodoro_minutes", kind="minutes"),
    ConfigField(key=KEY_BREAK_MINUTES, attribute="break_minutes", kind="minutes"),
)
