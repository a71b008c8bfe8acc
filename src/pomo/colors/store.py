"""File-backed store of named two-color palettes."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from .errors import (
    InvalidColorFormatError,
    InvalidPaletteNameError,
    PaletteNotFoundError,
)
from .rgb import RGB

COLORS_DIR_NAME = "colors"


@dataclass(frozen=True)
class Palette:
    """Named pair of foreground colors: text color and accent color."""
    name: str
    fg1: RGB
    fg2: RGB


def validate_palette_name(name: str) -> str:
    """Return `name` stripped, or raise if it is not a plain file name."""
    text = (name or "").strip()
    if not text or text.startswith(".") or "/" in text or os.sep in text:
        raise InvalidPaletteNameError(f"Invalid palette name: {name!r}")
    return text


def parse_palette_record(text: str) -> tuple[RGB, RGB]:
    tokens = text.split()
    if len(tokens) < 2:
        raise InvalidColorFormatError(
            f"Palette record needs two colors, got {len(tokens)} token(s)"
        )
    return RGB.from_hex(tokens[0]), RGB.from_hex(tokens[1])


def format_palette_record(fg1: RGB, fg2: RGB) -> str:
    return f"{fg1.to_hex()} {fg2.to_hex()}\n"


class _PaletteListing:
    """Re-iterable view over the palettes currently on disk."""

    def __init__(self, store: "ColorStore"):
        self._store = store

    def __iter__(self) -> Iterator[Palette]:
        return self._store.iter_palettes()


class ColorStore:
    """Saves, loads, deletes and lists palettes under `<root>/colors`."""

    def __init__(self, root_dir: Path, *, logger: Optional[logging.Logger] = None):
        self._colors_dir = Path(root_dir) / COLORS_DIR_NAME
        self._logger = logger or logging.getLogger("pomo.colors")

    @property
    def colors_dir(self) -> Path:
        return self._colors_dir

    def path_for(self, name: str) -> Path:
        return self._colors_dir / validate_palette_name(name)

    def save(self, name: str, fg1: RGB, fg2: RGB) -> Palette:
        path = self.path_for(name)
        palette = Palette(name=path.name, fg1=fg1, fg2=fg2)
        try:
            self._colors_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(format_palette_record(fg1, fg2), encoding="utf-8")
        except OSError as error:
            self._logger.warning("Failed to save palette %s: %s", path, error)
            return palette
        self._logger.info("Saved palette %s: %s %s", palette.name, fg1, fg2)
        return palette

    def load(self, name: str) -> tuple[RGB, RGB]:
        path = self.path_for(name)
        try:
            text = path.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError) as error:
            raise PaletteNotFoundError(path.name) from error
        return parse_palette_record(text)

    def delete(self, name: str) -> None:
        path = self.path_for(name)
        try:
            path.unlink()
        except FileNotFoundError as error:
            raise PaletteNotFoundError(path.name) from error
        self._logger.info("Deleted palette %s", path.name)

    def list(self) -> _PaletteListing:
        """Return a lazy listing; each iteration re-reads the directory."""
        return _PaletteListing(self)

    def iter_palettes(self) -> Iterator[Palette]:
        try:
            entries = os.scandir(self._colors_dir)
        except FileNotFoundError:
            return
        with entries:
            for entry in entries:
                if entry.name.startswith(".") or not entry.is_file():
                    continue
                try:
                    text = Path(entry.path).read_text(encoding="utf-8")
                    fg1, fg2 = parse_palette_record(text)
                except (OSError, InvalidColorFormatError) as error:
                    self._logger.warning("Skipping palette %s: %s", entry.name, error)
                    continue
                yield Palette(name=entry.name, fg1=fg1, fg2=fg2)
