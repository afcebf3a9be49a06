"""VolumeFader: smooth volume transitions on a media object.

This module provides the VolumeFader controller. It owns at most one fade
record, runs a self-rescheduling update loop through an injected scheduler
and writes scaled volume levels to the media object on every step.
"""

import logging
from enum import IntEnum

from .core.exceptions import InvalidArgument
from .core.fade_record import FadeRecord
from .core.fader_config import FaderConfig, InterpolationMode, parse_interpolation
from .core.media import check_media
from .core.mixins import FadeMixin, FaderConfigMixin
from .core.scale import make_scale
from .core.validation import check_callback, check_positive, check_volume
from .schedulers import IntervalScheduler, Scheduler, monotonic_ms

logger = logging.getLogger(__name__)

__all__ = [
    "FaderState",
    "VolumeFader",
]


class FaderState(IntEnum):
    """Observable state of a VolumeFader."""

    IDLE = 0  # Loop not running (a stopped fade may be frozen)
    FADING = 1  # Loop running with a fade in flight
    ACTIVE_NO_FADE = 2  # Loop running with nothing to do


class VolumeFader(FaderConfigMixin, FadeMixin):
    """Fade a media object's volume over a configurable duration.

    The fader works in the fade domain: targets are levels in [0, 1] that go
    through the scale before they reach ``media.volume``. Each update step
    interpolates the level from the fade record's timestamps (or steps it
    towards the target in INCREMENT mode), writes ``scale(level)`` to the
    media and, once the end time is reached, snaps to ``scale(end_volume)``
    and calls the completion callback.

    Callers must not write ``media.volume`` themselves while a fade is live.

    All mutating methods return the fader so calls can be chained::

        fader = VolumeFader(player, volume=0).set_fade_duration(2000)
        fader.fade_in(lambda: print("faded in"))
    """

    def __init__(
        self,
        media,
        volume: float | None = None,
        fade_duration: float | None = None,
        update_interval: float | None = None,
        scale=None,
        scheduler: Scheduler | None = None,
        clock=None,
        interpolation: InterpolationMode | str | None = None,
        strict: bool | None = None,
        config: FaderConfig | None = None,
    ):
        """Initialize the VolumeFader.

        The fader does not start on its own: the loop runs from the first
        fade (or an explicit start()) until the fade completes or stop().

        Args:
            media: Object with a read/write ``volume`` attribute in [0, 1]
            volume: Initial fade-domain level (0.0-1.0), written through the scale
            fade_duration: Duration of fades in milliseconds
            update_interval: Tick period in milliseconds
            scale: Callable mapping [0, 1] to [0, 1], defaults to the decibel scale
            scheduler: Scheduler driving the loop, defaults to an IntervalScheduler
            clock: Callable returning the time in milliseconds
            interpolation: InterpolationMode (or its name)
            strict: If False, invalid volume/duration/interval fall back to defaults
            config: FaderConfig holding defaults, None for the global default

        Raises:
            InvalidArgument: on unusable media, scale, clock or scheduler, and in
                strict mode on an invalid volume, duration or interval
        """
        super().__init__(config=config, scale=scale)
        config = self.config

        self._media = check_media(media)
        if strict is None:
            strict = config.strict
        elif not isinstance(strict, bool):
            raise InvalidArgument(f"strict must be a bool, got {strict!r}")
        self._strict = strict

        if self._scale is None:
            self._scale = make_scale(dynamic_range=config.dynamic_range)

        if clock is None:
            clock = monotonic_ms
        elif not callable(clock):
            raise InvalidArgument(f"clock must be callable, got {type(clock).__name__}")
        self._clock = clock

        if interpolation is None:
            interpolation = config.interpolation
        self._interpolation = parse_interpolation(interpolation)

        self._active = False
        self._last_step_time = 0.0
        self._fade_duration = config.fade_duration
        self._update_interval = config.update_interval

        if fade_duration is not None:
            try:
                self._fade_duration = check_positive(fade_duration, "fade_duration")
            except InvalidArgument:
                if strict:
                    raise
                logger.info("VolumeFader: invalid fade duration %r, using default %s", fade_duration, config.fade_duration)

        if update_interval is not None:
            try:
                self._update_interval = check_positive(update_interval, "update_interval")
            except InvalidArgument:
                if strict:
                    raise
                logger.info(
                    "VolumeFader: invalid update interval %r, using default %s", update_interval, config.update_interval
                )

        if scheduler is None:
            scheduler = IntervalScheduler(self._update_interval)
        elif not isinstance(scheduler, Scheduler):
            raise InvalidArgument(f"scheduler must be a Scheduler, got {type(scheduler).__name__}")
        self._scheduler = scheduler

        if volume is not None:
            try:
                volume = check_volume(volume, "volume")
            except InvalidArgument:
                if strict:
                    raise
                logger.info("VolumeFader: invalid initial volume %r ignored", volume)
            else:
                self._media.volume = self._apply_scale(volume)

        logger.debug("VolumeFader initialized for %r", media)

    def __repr__(self):
        return (
            f"<{self.__class__.__name__} state={self.state.name} "
            f"fade_duration={self._fade_duration} scale={self._scale!r}>"
        )

    @property
    def media(self):
        """Get the media object being faded."""
        return self._media

    @property
    def active(self) -> bool:
        """True while the update loop is registered to fire again."""
        return self._active

    @property
    def state(self) -> FaderState:
        if not self._active:
            return FaderState.IDLE
        if self._fade is None:
            return FaderState.ACTIVE_NO_FADE
        return FaderState.FADING

    @property
    def fade_duration(self) -> float:
        """Get the duration of new fades in milliseconds."""
        return self._fade_duration

    @property
    def update_interval(self) -> float:
        """Get the tick period in milliseconds."""
        return self._update_interval

    @property
    def interpolation(self) -> InterpolationMode:
        return self._interpolation

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    def set_fade_duration(self, fade_duration: float):
        """Set the duration of subsequent fades.

        A fade already in flight keeps its own end time.

        Args:
            fade_duration: Duration in milliseconds (> 0)
        """
        logger.debug("VolumeFader.set_fade_duration(%s)", fade_duration)
        fade_duration = check_positive(fade_duration, "fade_duration")
        with self._lock:
            self._fade_duration = fade_duration
        return self

    def set_update_interval(self, update_interval: float):
        """Set the tick period, restarting an interval timer if it runs.

        Args:
            update_interval: Tick period in milliseconds (> 0)
        """
        logger.debug("VolumeFader.set_update_interval(%s)", update_interval)
        update_interval = check_positive(update_interval, "update_interval")
        with self._lock:
            self._update_interval = update_interval
            set_interval = getattr(self._scheduler, "set_interval", None)
            if callable(set_interval):
                set_interval(update_interval)
        return self

    def set_interpolation(self, interpolation: InterpolationMode | str):
        """Switch between TIME and INCREMENT interpolation."""
        logger.debug("VolumeFader.set_interpolation(%s)", interpolation)
        interpolation = parse_interpolation(interpolation)
        with self._lock:
            self._interpolation = interpolation
        return self

    def start(self):
        """Start the update loop.

        Runs one update step right away, then keeps the scheduler armed while
        there is work left. Calling it on a running fader re-triggers the loop.
        A fade frozen by stop() resumes from its original timestamps.
        """
        logger.debug("VolumeFader.start()")
        with self._lock:
            self._active = True
        self._tick()
        return self

    def stop(self):
        """Stop the update loop.

        The current fade is kept, not cancelled: its progress is computed from
        wall-clock time, so a later start() jumps to wherever elapsed time now
        places it.
        """
        logger.debug("VolumeFader.stop()")
        with self._lock:
            self._active = False
            self._scheduler.cancel()
        return self

    def fade_to(self, target_volume: float, callback=None):
        """Fade from the current level to target_volume over fade_duration.

        Any fade in flight is replaced and its callback will never be called.

        Args:
            target_volume: Fade-domain target level (0.0-1.0)
            callback: Called without arguments once the fade completes

        Raises:
            InvalidArgument: on an out-of-range volume or non-callable callback;
                the fader state is left untouched
        """
        logger.debug("VolumeFader.fade_to(%s)", target_volume)
        target_volume = check_volume(target_volume, "target_volume")
        check_callback(callback)
        with self._lock:
            start_volume = min(1.0, max(0.0, self._level_from_volume(self._media.volume)))
            record = FadeRecord.create(start_volume, target_volume, self._clock(), self._fade_duration, callback)
            self._replace_fade(record)
            self._last_step_time = record.start_time
        return self.start()

    def fade_in(self, callback=None):
        """Fade to full volume."""
        return self.fade_to(1.0, callback)

    def fade_out(self, callback=None):
        """Fade to silence."""
        return self.fade_to(0.0, callback)

    def update_step(self):
        """Advance the current fade to the present time.

        Does nothing when the loop is not active or there is no fade. When the
        fade reaches its end, the volume is set to exactly ``scale(end_volume)``
        and the fader returns to idle before the completion callback runs, so
        an exception raised by the callback propagates to the caller without
        leaving the fader half-finished.
        """
        with self._lock:
            record = self._fade
            if not self._active or record is None:
                return self

            now = self._clock()
            if self._interpolation == InterpolationMode.INCREMENT:
                level = self._level_from_volume(self._media.volume)
            else:
                level = record.start_volume
            elapsed = now - self._last_step_time
            self._last_step_time = now
            level, done = self._next_level(record, level, now, self._interpolation, self._update_interval, elapsed)

            if not done:
                self._media.volume = self._apply_scale(level)
                return self

            self._media.volume = self._apply_scale(record.end_volume)
            self._clear_fade()
            self._active = False
            self._scheduler.cancel()

        logger.debug("VolumeFader fade to %s complete", record.end_volume)
        if record.on_complete is not None:
            record.on_complete()
        return self

    def _tick(self):
        """Scheduled callback: one update step, then re-arm while active."""
        self.update_step()
        with self._lock:
            if self._active:
                self._scheduler.schedule(self._tick)
