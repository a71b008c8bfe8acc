"""Chime playback on the default sound device."""

import logging
from typing import Optional

import numpy as np
import sounddevice as sd

from .chime import DEFAULT_SAMPLE_RATE_HZ
from .errors import AlertError

TAIL_PADDING_MS = 150


class SoundDeviceAudioOutput:
    def __init__(
        self,
        device: Optional[int] = None,
        blocksize: int = 1024,
        logger: Optional[logging.Logger] = None,
    ):
        self._device = device
        self._blocksize = blocksize
        self._logger = logger or logging.getLogger("pomo.alerts")

    def play(self, samples: np.ndarray, sample_rate_hz: int = DEFAULT_SAMPLE_RATE_HZ) -> None:
        if samples.ndim != 1 or samples.size == 0:
            raise AlertError("Chime must be a non-empty one-channel buffer")

        cursor = 0

        def fill(outdata, frames, time_info, status):
            nonlocal cursor
            if status:
                self._logger.debug("Chime stream status: %s", status)
            block = samples[cursor : cursor + frames]
            cursor += len(block)
            outdata.fill(0)
            outdata[: len(block), 0] = block
            if len(block) < frames:
                raise sd.CallbackStop()

        playback_ms = int(samples.size * 1000 / sample_rate_hz) + TAIL_PADDING_MS
        try:
            with sd.OutputStream(
                samplerate=sample_rate_hz,
                channels=1,
                dtype="float32",
                blocksize=self._blocksize,
                device=self._device,
                callback=fill,
            ):
                sd.sleep(playback_ms)
        except Exception as error:
            raise AlertError(f"Chime playback failed: {error}") from error
