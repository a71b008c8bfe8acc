"""Fire-and-forget completion alert: desktop notification plus chime."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .chime import build_chime
from .errors import AlertError
from .notifier import DesktopNotifier


class CompletionAlertService:
    """Announces a finished countdown; delivery failures are only logged."""

    def __init__(
        self,
        *,
        notifier: Optional[DesktopNotifier] = None,
        audio_output: Optional[Any] = None,
        sound_enabled: bool = True,
        logger: Optional[logging.Logger] = None,
    ):
        self._logger = logger or logging.getLogger("pomo.alerts")
        self._notifier = notifier or DesktopNotifier(logger=self._logger)
        self._audio_output = audio_output
        self._sound_enabled = sound_enabled

    def announce(self, label: str) -> None:
        self._notifier.notify(label, "Done!")
        if self._sound_enabled:
            self._play_chime()

    def _play_chime(self) -> None:
        output = self._audio_output or self._default_output()
        if output is None:
            return
        try:
            output.play(build_chime())
        except AlertError as error:
            self._logger.debug("Completion chime failed: %s", error)

    def _default_output(self) -> Optional[Any]:
        try:
            # PortAudio is loaded on import; a host without it just stays silent.
            from .output import SoundDeviceAudioOutput
        except (ImportError, OSError) as error:
            self._logger.debug("Audio output unavailable: %s", error)
            return None
        return SoundDeviceAudioOutput(logger=self._logger)
