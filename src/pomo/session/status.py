"""Whole-frame status snapshot shared with `pomo -status` readers."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .errors import NoActiveTimerError

STATUS_FILE_NAME = "status"


class StatusPublisher:
    """Writes, reads and clears the pre-rendered status snapshot file."""

    def __init__(self, root_dir: Path, *, logger: Optional[logging.Logger] = None):
        self._path = Path(root_dir) / STATUS_FILE_NAME
        self._logger = logger or logging.getLogger("pomo.status")

    @property
    def path(self) -> Path:
        return self._path

    @property
    def _temp_path(self) -> Path:
        return self._path.with_name(f".{self._path.name}.{os.getpid()}.tmp")

    def publish(self, frame_text: str) -> None:
        """Replace the snapshot with `frame_text`; readers never see a partial frame."""
        temp_path = self._temp_path
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(frame_text, encoding="utf-8")
            os.replace(temp_path, self._path)
        except OSError as error:
            self._logger.warning("Failed to publish status %s: %s", self._path, error)
            remove_if_exists(temp_path, self._logger)

    def clear(self) -> None:
        remove_if_exists(self._temp_path, self._logger)
        if remove_if_exists(self._path, self._logger):
            self._logger.debug("Cleared status snapshot %s", self._path)

    def read(self) -> str:
        """Return the latest snapshot as written, stale or not."""
        try:
            return self._path.read_text(encoding="utf-8")
        except FileNotFoundError as error:
            raise NoActiveTimerError("No active timer") from error


def remove_if_exists(path: Path, logger: logging.Logger) -> bool:
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as error:
        logger.warning("Failed to remove %s: %s", path, error)
        return False
    return True
