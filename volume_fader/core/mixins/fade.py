"""Fade mixin owning the in-flight fade record and its interpolation."""

import logging
import threading

from ..exceptions import InvalidArgument
from ..fade_record import FadeRecord
from ..fader_config import InterpolationMode
from ..scale import Scale, invert_level

logger = logging.getLogger(__name__)

__all__ = [
    "FadeMixin",
]


class FadeMixin:
    """Mixin for tracking one fade and computing its levels over time.

    Holds at most one FadeRecord and the scale mapping fade-domain levels
    to physical volume. Subclasses own the media object and the clock.
    ``_lock`` is re-entrant and shared with update steps arriving on a
    scheduler thread.
    """

    def __init__(self, scale=None, *args, **kwargs):
        """Initialize the fade mixin.

        Args:
            scale: Callable mapping [0, 1] to [0, 1]; None keeps the subclass default
        """
        super().__init__(*args, **kwargs)
        self._lock = threading.RLock()
        self._scale = None
        if scale is not None:
            self._set_scale(scale)
        self._fade: FadeRecord | None = None

    def _set_scale(self, scale) -> None:
        if not callable(scale):
            raise InvalidArgument(f"scale must be callable, got {type(scale).__name__}")
        self._scale = scale

    def set_scale(self, scale):
        """Replace the scale function.

        User scales are not bounds-checked: a scale returning values outside
        [0, 1] writes them to the media object as they are.

        Args:
            scale: Callable mapping [0, 1] to [0, 1]
        """
        logger.debug("FadeMixin.set_scale(%r)", scale)
        with self._lock:
            self._set_scale(scale)
        return self

    @property
    def scale(self):
        """Get the current scale function."""
        return self._scale

    @property
    def current_fade(self) -> FadeRecord | None:
        """Get the in-flight fade record, if any."""
        return self._fade

    @property
    def is_fading(self) -> bool:
        """Check if a fade record is pending (running or frozen)."""
        return self._fade is not None

    def _replace_fade(self, record: FadeRecord) -> None:
        """Install record, discarding any previous one and its callback."""
        with self._lock:
            if self._fade is not None:
                logger.debug("Superseding fade %s", self._fade)
            self._fade = record

    def _clear_fade(self) -> FadeRecord | None:
        with self._lock:
            record, self._fade = self._fade, None
            return record

    def _level_from_volume(self, volume: float) -> float:
        """Fade-domain level behind a physical volume."""
        return invert_level(self._scale, volume)

    def _apply_scale(self, level: float) -> float:
        value = self._scale(level)
        if isinstance(self._scale, Scale):
            return value
        # User scales may return numpy scalars or ints
        return float(value)

    def _next_level(
        self,
        record: FadeRecord,
        level: float,
        now: float,
        mode: InterpolationMode,
        interval: float,
        elapsed: float | None = None,
    ) -> tuple[float, bool]:
        """Compute the level for this update step.

        Args:
            record: The fade being processed
            level: Current fade-domain level (only used by INCREMENT)
            now: Current timestamp in milliseconds
            mode: InterpolationMode to apply
            interval: Update interval in milliseconds (only used by INCREMENT)
            elapsed: Milliseconds since the previous step, None for one interval
                (only used by INCREMENT)

        Returns:
            (level, done) where done means the fade reached its end
        """
        if mode == InterpolationMode.INCREMENT:
            remaining = record.end_time - now
            if elapsed is None:
                elapsed = interval
            if remaining <= interval or elapsed >= remaining:
                return record.end_volume, True
            # A step taken with no elapsed time leaves the level where it is
            step = max(0.0, elapsed)
            return level + (record.end_volume - level) * step / remaining, False

        # TIME: position is fully determined by the timestamps
        if record.is_complete(now):
            return record.end_volume, True
        return record.level_at(now), False
