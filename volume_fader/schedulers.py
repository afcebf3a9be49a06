"""Scheduling primitives driving a fader's update loop.

A fader asks its scheduler to run a callback again after every update step
while it is active (``schedule``) and deregisters with ``cancel`` when it
stops or a fade completes. Repeating schedulers treat extra ``schedule``
calls as no-ops; one-shot schedulers fire once per ``schedule``.
"""

import asyncio
import logging
import threading
import time
from abc import ABC, abstractmethod

from .core.constants import DEFAULT_FRAME_INTERVAL, DEFAULT_UPDATE_INTERVAL
from .core.validation import check_positive

logger = logging.getLogger(__name__)

__all__ = [
    "Scheduler",
    "IntervalScheduler",
    "AsyncioScheduler",
    "ManualScheduler",
    "ManualClock",
    "monotonic_ms",
]


def monotonic_ms() -> float:
    """Default fader clock: monotonic time in milliseconds."""
    return time.monotonic() * 1000


class Scheduler(ABC):
    """Interface of the scheduling primitive consumed by VolumeFader."""

    @abstractmethod
    def schedule(self, callback) -> None:
        """Arrange for callback to run on the next tick."""
        raise NotImplementedError()

    @abstractmethod
    def cancel(self) -> None:
        """Deregister; no callback fires after this returns."""
        raise NotImplementedError()

    @property
    @abstractmethod
    def armed(self) -> bool:
        """True while a callback is registered to fire again."""
        raise NotImplementedError()


class IntervalScheduler(Scheduler):
    """Fixed-interval timer running callbacks on a daemon thread.

    The thread is started by the first ``schedule`` call and keeps firing
    every ``interval`` milliseconds until ``cancel``.
    """

    def __init__(self, interval: float = DEFAULT_UPDATE_INTERVAL):
        """Initialize the scheduler.

        Args:
            interval: Tick period in milliseconds
        """
        self._interval = check_positive(interval, "interval")
        self._lock = threading.RLock()
        self._callback = None
        self._thread = None
        self._stop_event = None

    @property
    def interval(self) -> float:
        """Get the tick period in milliseconds."""
        return self._interval

    @property
    def armed(self) -> bool:
        return self._thread is not None

    def set_interval(self, interval: float) -> None:
        """Set the tick period, restarting the timer if it is running.

        Args:
            interval: Tick period in milliseconds
        """
        interval = check_positive(interval, "interval")
        logger.debug("IntervalScheduler.set_interval(%s)", interval)
        with self._lock:
            self._interval = interval
            if self._thread is not None:
                callback = self._callback
                self.cancel()
                self.schedule(callback)

    def schedule(self, callback) -> None:
        with self._lock:
            self._callback = callback
            if self._thread is not None:
                return
            logger.debug("Create interval scheduler Thread")
            self._stop_event = threading.Event()
            self._thread = threading.Thread(target=self._thread_task, args=(self._stop_event,), daemon=True)
            self._thread.start()

    def cancel(self) -> None:
        with self._lock:
            if self._stop_event is not None:
                logger.debug("Stop interval scheduler Thread")
                self._stop_event.set()
            self._thread = None
            self._stop_event = None
            self._callback = None

    def _thread_task(self, stop_event: threading.Event):
        """Daemon thread firing the callback every interval until stop_event is set."""
        logger.debug("In interval scheduler Thread")
        try:
            while not stop_event.wait(self._interval / 1000):
                with self._lock:
                    callback = None if stop_event.is_set() else self._callback
                if callback is None:
                    break
                callback()
        except Exception as e:
            logger.exception(f"Scheduled callback failed: {e}")
            raise
        finally:
            with self._lock:
                if self._stop_event is stop_event:
                    self._thread = None
                    self._stop_event = None
            logger.debug("Exit interval scheduler Thread")


class AsyncioScheduler(Scheduler):
    """One-shot, frame-style scheduler on an asyncio event loop.

    Each ``schedule`` arms a single ``call_later`` one frame ahead; the fader
    re-arms it from within every step.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None, frame_interval: float = DEFAULT_FRAME_INTERVAL):
        """Initialize the scheduler.

        Args:
            loop: Event loop to use, or None for the loop running at schedule time
            frame_interval: Delay between frames in seconds
        """
        self._loop = loop
        self._frame_interval = check_positive(frame_interval, "frame_interval")
        self._handle: asyncio.TimerHandle | None = None

    @property
    def armed(self) -> bool:
        return self._handle is not None

    def schedule(self, callback) -> None:
        loop = self._loop or asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
        self._handle = loop.call_later(self._frame_interval, self._run, callback)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _run(self, callback):
        self._handle = None
        callback()


class ManualScheduler(Scheduler):
    """Host-driven one-shot scheduler.

    Nothing fires on its own: the host calls ``fire()`` once per frame (or a
    test calls it to step through a fade deterministically).
    """

    def __init__(self):
        self._callback = None
        self.fired = 0

    @property
    def armed(self) -> bool:
        return self._callback is not None

    def schedule(self, callback) -> None:
        self._callback = callback

    def cancel(self) -> None:
        self._callback = None

    def fire(self) -> bool:
        """Run the pending callback, if any.

        Returns:
            True if a callback ran
        """
        callback, self._callback = self._callback, None
        if callback is None:
            return False
        self.fired += 1
        callback()
        return True

    def run_until_idle(self, clock=None, step: float = DEFAULT_UPDATE_INTERVAL, max_steps: int = 100000) -> int:
        """Fire until nothing is pending, advancing clock by step before each fire.

        Args:
            clock: ManualClock to advance, or None to leave time alone
            step: Milliseconds to advance per fire
            max_steps: Safety bound on the number of fires

        Returns:
            Number of callbacks fired
        """
        count = 0
        while self.armed and count < max_steps:
            if clock is not None:
                clock.advance(step)
            self.fire()
            count += 1
        return count


class ManualClock:
    """Clock returning a settable time in milliseconds."""

    def __init__(self, now: float = 0.0):
        self.now = float(now)

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        """Move time forward by ms and return the new time."""
        self.now += ms
        return self.now

    def set(self, now: float) -> float:
        self.now = float(now)
        return self.now
