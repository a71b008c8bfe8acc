"""Desktop notification via the platform's notifier command."""

from __future__ import annotations

import logging
import platform
import shutil
import subprocess
from typing import Optional


class DesktopNotifier:
    """Spawns `terminal-notifier`/`osascript` on macOS or `notify-send` elsewhere."""

    def __init__(
        self,
        *,
        system: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._system = system or platform.system()
        self._logger = logger or logging.getLogger("pomo.alerts")

    def command_for(self, title: str, message: str) -> Optional[list[str]]:
        if self._system == "Darwin":
            if shutil.which("terminal-notifier"):
                return [
                    "terminal-notifier",
                    "-title",
                    title,
                    "-message",
                    message,
                    "-sound",
                    "default",
                ]
            if shutil.which("osascript"):
                script = f"display notification {_quote(message)} with title {_quote(title)}"
                return ["osascript", "-e", script]
            return None
        if shutil.which("notify-send"):
            return ["notify-send", title, message]
        return None

    def notify(self, title: str, message: str) -> bool:
        """Start the notifier without waiting for it; returns False if none ran."""
        command = self.command_for(title, message)
        if command is None:
            self._logger.debug("No desktop notifier available on %s", self._system)
            return False
        try:
            subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as error:
            self._logger.debug("Desktop notification failed: %s", error)
            return False
        return True


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
