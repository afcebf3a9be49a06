"""Mock classes and utilities for volume-fader tests.

Centralizes all test mock classes and factory functions to avoid
duplication across test modules.
"""

from volume_fader import LinearScale, ManualClock, ManualScheduler, VolumeFader


class MockMedia:
    """Media object recording every volume write."""

    def __init__(self, volume=1.0):
        self._volume = volume
        self.writes = []

    @property
    def volume(self):
        return self._volume

    @volume.setter
    def volume(self, value):
        self._volume = value
        self.writes.append(value)


class ReadOnlyMedia:
    """Media object whose volume cannot be written."""

    @property
    def volume(self):
        return 0.5


class MockPlayer:
    """Player exposing volume through methods, like a sound object."""

    def __init__(self, volume=1.0):
        self._volume = volume

    @property
    def volume(self):
        return self._volume

    def set_volume(self, volume):
        self._volume = max(0.0, min(1.0, volume))


def create_fader(media=None, clock=None, scheduler=None, **kwargs):
    """Create a VolumeFader driven by a manual clock and scheduler.

    Defaults to a linear scale and a 1000 ms fade so levels are easy to
    reason about; override through kwargs.

    Returns:
        (fader, media, clock, scheduler)
    """
    media = MockMedia() if media is None else media
    clock = ManualClock() if clock is None else clock
    scheduler = ManualScheduler() if scheduler is None else scheduler
    kwargs.setdefault("fade_duration", 1000)
    kwargs.setdefault("scale", LinearScale())
    fader = VolumeFader(media, clock=clock, scheduler=scheduler, **kwargs)
    if isinstance(media, MockMedia):
        media.writes.clear()
    return fader, media, clock, scheduler
