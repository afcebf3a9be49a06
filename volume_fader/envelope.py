"""Offline rendering of fades as per-sample gain envelopes.

Renders what a VolumeFader would do to a live media object as a numpy gain
array, so a fade can be previewed or baked into PCM audio.
"""

import logging

import numpy as np

from .core.exceptions import InvalidArgument
from .core.fade_record import FadeRecord

logger = logging.getLogger(__name__)

__all__ = [
    "fade_envelope",
    "apply_fade",
]


def fade_envelope(record: FadeRecord, scale, sample_rate: int, num_samples: int, offset: float = 0.0) -> np.ndarray:
    """Compute the gain applied at each sample.

    Sample ``i`` sits at ``offset + i * 1000 / sample_rate`` ms on the record's
    clock. Samples before start_time get ``scale(start_volume)``, samples at or
    after end_time get exactly ``scale(end_volume)``.

    Args:
        record: The fade to render
        scale: Scale function (vectorised built-in scales are fastest)
        sample_rate: Sample rate in Hz
        num_samples: Number of samples to render
        offset: Clock time of the first sample in milliseconds

    Returns:
        float32 array of shape (num_samples,)
    """
    if sample_rate <= 0:
        raise InvalidArgument(f"sample_rate must be positive, got {sample_rate}")
    if num_samples < 0:
        raise InvalidArgument(f"num_samples must not be negative, got {num_samples}")

    times = offset + np.arange(num_samples, dtype=np.float64) * (1000.0 / sample_rate)
    levels = record.levels_at(times)
    gains = None
    try:
        gains = np.asarray(scale(levels), dtype=np.float64)
    except (TypeError, ValueError):
        logger.debug("fade_envelope: %r is not vectorised, applying per sample", scale)
    if gains is None or gains.shape != levels.shape:
        # Plain scalar functions, e.g. ones branching on their input
        gains = np.array([scale(float(level)) for level in levels], dtype=np.float64)

    # Force exact target volume at the end to avoid float drift
    gains[times >= record.end_time] = scale(record.end_volume)
    return gains.astype(np.float32)


def apply_fade(audio: np.ndarray, record: FadeRecord, scale, sample_rate: int, offset: float = 0.0) -> np.ndarray:
    """Return audio with the fade envelope applied.

    Args:
        audio: Float audio, shape (samples,) or (samples, channels)
        record: The fade to render
        scale: Scale function
        sample_rate: Sample rate in Hz
        offset: Clock time of the first sample in milliseconds
    """
    logger.debug("apply_fade(%s samples, %s)", audio.shape[0], record)
    envelope = fade_envelope(record, scale, sample_rate, audio.shape[0], offset)
    if audio.ndim == 1:
        return (audio * envelope).astype(audio.dtype)
    # Broadcast envelope (N,) to audio (N, Channels) via (N, 1)
    return (audio * envelope[:, np.newaxis]).astype(audio.dtype)
