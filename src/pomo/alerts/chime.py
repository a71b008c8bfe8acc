"""Synthesized completion chime."""

import numpy as np

DEFAULT_SAMPLE_RATE_HZ = 44100


def build_chime(
    sample_rate_hz: int = DEFAULT_SAMPLE_RATE_HZ,
    *,
    tones_hz: tuple[float, ...] = (880.0, 1318.5),
    tone_seconds: float = 0.18,
    volume: float = 0.3,
) -> np.ndarray:
    """Return a mono float32 chime: one short faded sine burst per tone."""
    samples = int(sample_rate_hz * tone_seconds)
    t = np.arange(samples, dtype=np.float32) / float(sample_rate_hz)
    envelope = np.linspace(1.0, 0.0, samples, dtype=np.float32) ** 2
    bursts = [
        np.sin(2.0 * np.pi * frequency * t).astype(np.float32) * envelope
        for frequency in tones_hz
    ]
    return (np.concatenate(bursts) * volume).astype(np.float32)
