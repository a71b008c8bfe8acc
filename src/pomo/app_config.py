"""Config root resolution and the persisted user config store."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from pomo.app_config_parser import format_config, parse_config_lines
from pomo.app_config_schema import (
    APP_DIR_NAME,
    CONFIG_FILE_NAME,
    ConfigUnreadableError,
    PomoConfig,
)

CONFIG_DIR_ENV = "POMO_CONFIG_DIR"
XDG_CONFIG_HOME_ENV = "XDG_CONFIG_HOME"


def resolve_config_root(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return the per-user directory holding config, pid, status and colors."""
    env = os.environ if environ is None else environ

    override = (env.get(CONFIG_DIR_ENV) or "").strip()
    if override:
        return Path(override).expanduser()

    xdg_home = (env.get(XDG_CONFIG_HOME_ENV) or "").strip()
    if xdg_home:
        return Path(xdg_home).expanduser() / APP_DIR_NAME

    home = (env.get("HOME") or "").strip()
    base = Path(home) if home else Path.home()
    return base / ".config" / APP_DIR_NAME


class ConfigStore:
    """Loads and fully rewrites the `config` file under the config root."""

    def __init__(self, root_dir: Path, *, logger: Optional[logging.Logger] = None):
        self._path = Path(root_dir) / CONFIG_FILE_NAME
        self._logger = logger or logging.getLogger("pomo.config")

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> PomoConfig:
        try:
            text = self._read()
        except ConfigUnreadableError as error:
            self._logger.warning("Using default config: %s", error)
            return PomoConfig()
        if text is None:
            return PomoConfig()
        return parse_config_lines(text.splitlines(), logger=self._logger)

    def save(self, config: PomoConfig) -> bool:
        """Overwrite the config file; returns False when the write failed."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(format_config(config), encoding="utf-8")
        except OSError as error:
            self._logger.warning("Failed to save config %s: %s", self._path, error)
            return False
        self._logger.info("Saved config: %s", self._path)
        return True

    def _read(self) -> Optional[str]:
        try:
            return self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as error:
            raise ConfigUnreadableError(f"Cannot read {self._path}: {error}") from error
