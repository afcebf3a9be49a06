"""Fader configuration for the volume-fader library.

This module provides the FaderConfig dataclass which holds the defaults used
by every VolumeFader created without explicit overrides.
"""

from dataclasses import dataclass
from enum import IntEnum

from .constants import DEFAULT_DYNAMIC_RANGE, DEFAULT_FADE_DURATION, DEFAULT_UPDATE_INTERVAL
from .exceptions import InvalidArgument
from .validation import check_positive

__all__ = [
    "FaderConfig",
    "InterpolationMode",
    "parse_interpolation",
]


class InterpolationMode(IntEnum):
    """How an update step computes the next fade-domain level."""

    TIME = 0  # Interpolate from the record's timestamps (jitter free)
    INCREMENT = 1  # Step proportionally towards the target each tick
    DEFAULT = TIME


def parse_interpolation(value) -> InterpolationMode:
    """Accept an InterpolationMode, its value or its name."""
    if isinstance(value, str):
        try:
            return InterpolationMode[value.upper()]
        except KeyError:
            raise InvalidArgument(f"unknown interpolation mode {value!r}") from None
    if isinstance(value, bool):
        raise InvalidArgument(f"unknown interpolation mode {value!r}")
    try:
        return InterpolationMode(value)
    except ValueError:
        raise InvalidArgument(f"unknown interpolation mode {value!r}") from None


@dataclass
class FaderConfig:
    """Configuration for volume fading.

    Attributes:
        fade_duration: Duration of new fades in milliseconds
        update_interval: Tick period of interval schedulers in milliseconds
        dynamic_range: Range of the default decibel scale in dB
        interpolation: InterpolationMode used by update steps
        strict: If False, invalid constructor options fall back to defaults
    """

    fade_duration: float = DEFAULT_FADE_DURATION
    update_interval: float = DEFAULT_UPDATE_INTERVAL
    dynamic_range: float = DEFAULT_DYNAMIC_RANGE
    interpolation: InterpolationMode = InterpolationMode.DEFAULT
    strict: bool = True

    def __post_init__(self):
        """Validate and normalize configuration parameters."""
        self.fade_duration = check_positive(self.fade_duration, "fade_duration")
        self.update_interval = check_positive(self.update_interval, "update_interval")
        self.dynamic_range = check_positive(self.dynamic_range, "dynamic_range")

        self.interpolation = parse_interpolation(self.interpolation)

        if not isinstance(self.strict, bool):
            raise InvalidArgument(f"strict must be a bool, got {self.strict!r}")

    @property
    def fade_duration_seconds(self) -> float:
        """Fade duration in seconds."""
        return self.fade_duration / 1000

    @property
    def update_interval_seconds(self) -> float:
        """Update interval in seconds."""
        return self.update_interval / 1000

    @property
    def steps_per_fade(self) -> int:
        """Number of interval ticks a fade of fade_duration spans (at least 1)."""
        return max(1, int(self.fade_duration // self.update_interval))
