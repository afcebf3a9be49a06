"""Fade record describing one in-flight fade."""

from dataclasses import dataclass
from typing import Callable

import numpy as np

from .exceptions import InvalidArgument
from .validation import check_callback, check_volume, is_number

__all__ = [
    "FadeRecord",
]


@dataclass(frozen=True)
class FadeRecord:
    """One fade, from start_volume at start_time to end_volume at end_time.

    Volumes are fade-domain levels (before scaling). Times are milliseconds
    on the owning controller's clock. Records are never mutated: a new fade
    replaces the record as a whole.

    Attributes:
        start_volume: Level at start_time (0.0-1.0)
        end_volume: Level at end_time (0.0-1.0)
        start_time: Start timestamp in milliseconds
        end_time: End timestamp in milliseconds, strictly after start_time
        on_complete: Called once when the fade finishes naturally
    """

    start_volume: float
    end_volume: float
    start_time: float
    end_time: float
    on_complete: Callable[[], object] | None = None

    def __post_init__(self):
        check_volume(self.start_volume, "start_volume")
        check_volume(self.end_volume, "end_volume")
        if not is_number(self.start_time) or not is_number(self.end_time):
            raise InvalidArgument(f"timestamps must be numbers, got {self.start_time!r}, {self.end_time!r}")
        if not self.start_time < self.end_time:
            raise InvalidArgument(f"start_time ({self.start_time}) must be before end_time ({self.end_time})")
        check_callback(self.on_complete, "on_complete")

    @classmethod
    def create(cls, start_volume: float, end_volume: float, now: float, duration: float, on_complete=None):
        """Create a record starting at ``now`` and lasting ``duration`` ms."""
        return cls(
            start_volume=float(start_volume),
            end_volume=float(end_volume),
            start_time=now,
            end_time=now + duration,
            on_complete=on_complete,
        )

    @property
    def duration(self) -> float:
        """Fade duration in milliseconds."""
        return self.end_time - self.start_time

    @property
    def delta(self) -> float:
        """Signed level change over the whole fade."""
        return self.end_volume - self.start_volume

    def progress(self, now: float) -> float:
        """Fraction of the fade elapsed at ``now``, clamped to [0, 1]."""
        return min(1.0, max(0.0, (now - self.start_time) / self.duration))

    def level_at(self, now: float) -> float:
        """Fade-domain level at ``now``."""
        return self.start_volume + self.progress(now) * self.delta

    def levels_at(self, times) -> np.ndarray:
        """Vectorized level_at over an array of timestamps."""
        progress = np.clip((np.asarray(times, dtype=np.float64) - self.start_time) / self.duration, 0.0, 1.0)
        return self.start_volume + progress * self.delta

    def remaining(self, now: float) -> float:
        """Milliseconds left until end_time (never negative)."""
        return max(0.0, self.end_time - now)

    def is_complete(self, now: float) -> bool:
        return now >= self.end_time
