"""Timer session lifecycle: register, count down, and always release."""

from __future__ import annotations

import logging
import signal
import sys
import time
from dataclasses import dataclass
from typing import Any, Callable, Literal, Optional

from pomo.alerts import CompletionAlertService
from pomo.pomodoro import EXIT_COMPLETED, EXIT_TERMINATED, CountdownTimer
from pomo.pomodoro.constants import TICK_SECONDS
from pomo.session import SessionHandle, SessionRegistry, StatusPublisher

from .ticks import TickProcessor

ExitReason = Literal["completed", "terminated"]

HANDLED_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGTERM, signal.SIGINT)


@dataclass(frozen=True)
class RuntimeBootstrap:
    """Dependency bundle for one timer run."""
    timer: CountdownTimer
    registry: SessionRegistry
    status: StatusPublisher
    ticks: TickProcessor
    alerts: CompletionAlertService
    logger: logging.Logger
    sleep: Optional[Callable[[float], None]] = None


class TimerRuntime:
    """Runs one countdown as the active session of this user."""
    def __init__(self, bootstrap: RuntimeBootstrap):
        self._bootstrap = bootstrap
        self._logger = bootstrap.logger
        self._previous_handlers: dict[int, Any] = {}
        self._released = False

    def run(self) -> int:
        bootstrap = self._bootstrap
        self._install_signal_handlers()
        handle = bootstrap.registry.begin()

        reason: ExitReason = EXIT_TERMINATED
        try:
            reason = self._count_down()
        finally:
            self.release_session(handle, reason)
            self._restore_signal_handlers()

        if reason == EXIT_COMPLETED:
            bootstrap.alerts.announce(bootstrap.timer.snapshot().label)
        return 0

    def release_session(self, handle: SessionHandle, reason: ExitReason) -> None:
        """Teardown shared by natural completion and external termination."""
        if self._released:
            return
        self._released = True
        for signum in HANDLED_SIGNALS:
            signal.signal(signum, signal.SIG_IGN)

        bootstrap = self._bootstrap
        if reason == EXIT_TERMINATED:
            bootstrap.timer.terminate()
        bootstrap.ticks.close()
        bootstrap.registry.end(handle)
        if bootstrap.ticks.tracking:
            bootstrap.status.clear()
        self._logger.info("Session released: pid=%s reason=%s", handle.pid, reason)

    def _count_down(self) -> ExitReason:
        bootstrap = self._bootstrap
        sleep = bootstrap.sleep or time.sleep
        bootstrap.ticks.begin(bootstrap.timer.start())
        for tick in bootstrap.timer.ticks():
            bootstrap.ticks.handle_tick(tick)
            if tick.completed:
                return EXIT_COMPLETED
            sleep(TICK_SECONDS)
        return EXIT_TERMINATED

    def handle_signal(self, signum: int, frame: Optional[Any]) -> None:
        signal_name = signal.Signals(signum).name
        self._logger.info("%s received, ending session", signal_name)
        self._bootstrap.timer.terminate()
        sys.exit(0)

    def _install_signal_handlers(self) -> None:
        for signum in HANDLED_SIGNALS:
            self._previous_handlers[signum] = signal.signal(signum, self.handle_signal)

    def _restore_signal_handlers(self) -> None:
        for signum, handler in self._previous_handlers.items():
            signal.signal(signum, signal.SIG_DFL if handler is None else handler)
        self._previous_handlers.clear()
