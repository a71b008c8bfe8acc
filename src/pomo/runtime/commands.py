"""One-shot commands: status, end, settings, and palette management."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field, replace
from typing import Optional, TextIO

from pomo.app_config import ConfigStore
from pomo.app_config_schema import PomoConfig
from pomo.colors import (
    ANSI_RESET,
    RGB,
    ColorStore,
    InvalidColorFormatError,
    Palette,
    PaletteNotFoundError,
    colorize,
)
from pomo.session import (
    NoActiveSessionError,
    NoActiveTimerError,
    SessionRegistry,
    SessionTerminationError,
    StatusPublisher,
)


@dataclass(frozen=True)
class CommandContext:
    """Stores and output streams shared by the one-shot commands."""
    config_store: ConfigStore
    color_store: ColorStore
    registry: SessionRegistry
    status: StatusPublisher
    logger: logging.Logger
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)


def show_status(ctx: CommandContext) -> int:
    try:
        snapshot = ctx.status.read()
    except NoActiveTimerError:
        print("No active timer.", file=ctx.stderr)
        return 1
    ctx.stdout.write(snapshot)
    ctx.stdout.flush()
    return 0


def end_session(ctx: CommandContext) -> int:
    try:
        pid = ctx.registry.terminate()
    except NoActiveSessionError:
        print("No active pomodoro session.", file=ctx.stderr)
        return 1
    except SessionTerminationError as error:
        print(str(error), file=ctx.stderr)
        return 1
    print(f"Ended pomodoro session (pid {pid}).", file=ctx.stdout)
    return 0


def apply_settings(
    ctx: CommandContext,
    config: PomoConfig,
    *,
    color1: Optional[RGB] = None,
    color2: Optional[RGB] = None,
    pomodoro_minutes: Optional[int] = None,
    break_minutes: Optional[int] = None,
) -> PomoConfig:
    """Apply explicit settings and rewrite the whole config when any changed."""
    changes = {
        name: value
        for name, value in (
            ("color1", color1),
            ("color2", color2),
            ("pomodoro_minutes", pomodoro_minutes),
            ("break_minutes", break_minutes),
        )
        if value is not None
    }
    if not changes:
        return config
    updated = replace(config, **changes)
    ctx.config_store.save(updated)
    ctx.logger.info("Updated config fields: %s", ", ".join(sorted(changes)))
    return updated


def save_palette(ctx: CommandContext, name: str, config: PomoConfig) -> int:
    palette = ctx.color_store.save(name, config.color1, config.color2)
    print(f"Saved palette '{palette.name}'.", file=ctx.stdout)
    return 0


def load_palette(
    ctx: CommandContext, name: str, config: PomoConfig
) -> tuple[int, PomoConfig]:
    """Load a palette and make it the active colors in the config."""
    try:
        color1, color2 = ctx.color_store.load(name)
    except PaletteNotFoundError as error:
        print(f"{error}.", file=ctx.stderr)
        return 1, config
    except InvalidColorFormatError as error:
        print(f"Palette '{name}' is malformed: {error}", file=ctx.stderr)
        return 1, config

    updated = apply_settings(ctx, config, color1=color1, color2=color2)
    print(f"Loaded palette '{name}'.", file=ctx.stdout)
    return 0, updated


def delete_palette(ctx: CommandContext, name: str) -> int:
    try:
        ctx.color_store.delete(name)
    except PaletteNotFoundError as error:
        print(f"{error}.", file=ctx.stderr)
        return 1
    print(f"Deleted palette '{name}'.", file=ctx.stdout)
    return 0


def list_palettes(ctx: CommandContext) -> int:
    count = 0
    for palette in ctx.color_store.list():
        print(format_palette_line(palette), file=ctx.stdout)
        count += 1
    if count == 0:
        print("No saved palettes.", file=ctx.stdout)
    return 0


def format_palette_line(palette: Palette) -> str:
    return (
        f"{colorize(palette.name, palette.fg1)}{ANSI_RESET}  "
        f"{colorize(palette.fg1.to_hex(), palette.fg1)} "
        f"{colorize(palette.fg2.to_hex(), palette.fg2)}{ANSI_RESET}"
    )
