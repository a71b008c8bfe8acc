"""PID-file registry for the single active timer session."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import psutil

from .errors import NoActiveSessionError, SessionTerminationError
from .status import StatusPublisher, remove_if_exists

PID_FILE_NAME = "pid"


@dataclass(frozen=True)
class SessionHandle:
    """Registration receipt held by the timer process for its lifetime."""
    pid: int
    registered: bool


class SessionRegistry:
    """Records the running timer's PID and terminates it on request.

    The single-session rule is advisory: `begin` overwrites whatever PID is
    recorded, so `end`/`status` always target the newest session.
    """

    def __init__(
        self,
        root_dir: Path,
        *,
        status: Optional[StatusPublisher] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._path = Path(root_dir) / PID_FILE_NAME
        self._logger = logger or logging.getLogger("pomo.session")
        self._status = status or StatusPublisher(root_dir, logger=self._logger)

    @property
    def path(self) -> Path:
        return self._path

    def begin(self) -> SessionHandle:
        pid = os.getpid()
        previous = self.active_pid()
        if previous is not None and previous != pid:
            self._logger.warning(
                "Replacing active session pid=%s; it can no longer be ended", previous
            )
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(f"{pid}\n", encoding="utf-8")
        except OSError as error:
            self._logger.warning(
                "Session registry unavailable (%s); `end` will not reach this timer",
                error,
            )
            return SessionHandle(pid=pid, registered=False)
        self._logger.info("Session started: pid=%s", pid)
        return SessionHandle(pid=pid, registered=True)

    def end(self, handle: SessionHandle) -> None:
        if not handle.registered:
            return
        recorded = self._read_pid()
        if recorded is not None and recorded != handle.pid:
            self._logger.info(
                "Session pid file now belongs to pid=%s; leaving it", recorded
            )
            return
        remove_if_exists(self._path, self._logger)
        self._logger.info("Session ended: pid=%s", handle.pid)

    def active_pid(self) -> Optional[int]:
        pid = self._read_pid()
        if pid is None or not is_process_alive(pid):
            return None
        return pid

    def terminate(self) -> int:
        """Signal the recorded session and remove its pid and status files."""
        pid = self._read_pid()
        if pid is None:
            raise NoActiveSessionError("No active timer session")

        if not is_process_alive(pid):
            self._logger.info("Reaping stale session files for pid=%s", pid)
            self._release_files()
            raise NoActiveSessionError("No active timer session")

        try:
            psutil.Process(pid).terminate()
        except psutil.NoSuchProcess as error:
            self._release_files()
            raise NoActiveSessionError("No active timer session") from error
        except psutil.AccessDenied as error:
            raise SessionTerminationError(
                f"Not permitted to stop session pid={pid}"
            ) from error

        self._logger.info("Sent SIGTERM to session pid=%s", pid)
        self._release_files()
        return pid

    def _release_files(self) -> None:
        remove_if_exists(self._path, self._logger)
        self._status.clear()

    def _read_pid(self) -> Optional[int]:
        try:
            text = self._path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        except OSError as error:
            self._logger.warning("Cannot read session pid file: %s", error)
            return None
        try:
            pid = int(text)
        except ValueError:
            self._logger.warning("Removing malformed session pid file: %r", text)
            remove_if_exists(self._path, self._logger)
            return None
        return pid if pid > 0 else None


def is_process_alive(pid: int) -> bool:
    if not psutil.pid_exists(pid):
        return False
    try:
        return psutil.Process(pid).status() != psutil.STATUS_ZOMBIE
    except psutil.NoSuchProcess:
        return False
    except psutil.AccessDenied:
        return True
