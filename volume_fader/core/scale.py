"""Scale functions mapping fade-domain levels to physical volume.

A scale is any callable ``f: [0, 1] -> [0, 1]`` that is monotonic and maps
silence to exactly zero. The built-in scales are vectorised with numpy: they
accept floats or arrays and return a float for scalar input. They also
provide ``inverse`` so a controller can recover the fade-domain level from a
volume it finds on the media object.
"""

import logging
from abc import ABC, abstractmethod
from enum import IntEnum

import numpy as np

from .constants import DB_PER_DECADE, DEFAULT_DYNAMIC_RANGE
from .exceptions import InvalidArgument
from .validation import check_positive

logger = logging.getLogger(__name__)

__all__ = [
    "FadeCurve",
    "Scale",
    "LinearScale",
    "DecibelScale",
    "CurveScale",
    "make_scale",
    "invert_level",
]


class FadeCurve(IntEnum):
    """Scale curve types."""

    LINEAR = 0
    DECIBEL = 1  # Exponential volume over a bounded dynamic range
    QUADRATIC = 2  # Power curve (x^2)
    SINE = 3  # Quarter sine, equal power
    SCURVE = 4  # Smoothstep (ease-in-ease-out)
    DEFAULT = DECIBEL


def _output(result: np.ndarray, original):
    """Return a float for scalar input, the array otherwise."""
    if np.ndim(original) == 0:
        return float(result)
    return result


class Scale(ABC):
    """Base class of the built-in scales."""

    curve: FadeCurve

    def __call__(self, level):
        progress = np.clip(np.asarray(level, dtype=np.float64), 0.0, 1.0)
        return _output(self._forward(progress), level)

    def inverse(self, volume):
        """Recover the fade-domain level producing ``volume``."""
        values = np.clip(np.asarray(volume, dtype=np.float64), 0.0, 1.0)
        return _output(np.clip(self._inverse(values), 0.0, 1.0), volume)

    @abstractmethod
    def _forward(self, progress: np.ndarray) -> np.ndarray:
        raise NotImplementedError()

    @abstractmethod
    def _inverse(self, volume: np.ndarray) -> np.ndarray:
        raise NotImplementedError()

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class LinearScale(Scale):
    """Identity scale: the fade-domain level is the volume."""

    curve = FadeCurve.LINEAR

    def _forward(self, progress):
        return progress

    def _inverse(self, volume):
        return volume


class DecibelScale(Scale):
    """Exponential scale over a bounded dynamic range.

    For ``p > 0`` the level is read as a position on a decibel axis spanning
    ``dynamic_range`` dB below full scale: ``f(p) = 10 ** ((p - 1) * range / 20)``.
    ``f(0)`` is exactly 0 so that silence is reported as silence rather than
    as the quietest representable step.
    """

    curve = FadeCurve.DECIBEL

    def __init__(self, dynamic_range: float = DEFAULT_DYNAMIC_RANGE):
        """Initialize the scale.

        Args:
            dynamic_range: Range in dB covered by levels 0+ to 1 (60 dB by default)
        """
        self._dynamic_range = check_positive(dynamic_range, "dynamic_range")
        self._decades = self._dynamic_range / DB_PER_DECADE

    @property
    def dynamic_range(self) -> float:
        """Get the dynamic range in dB."""
        return self._dynamic_range

    @property
    def floor(self) -> float:
        """Smallest non-zero volume this scale produces."""
        return 10.0 ** -self._decades

    def _forward(self, progress):
        return np.where(progress > 0, np.power(10.0, (progress - 1.0) * self._decades), 0.0)

    def _inverse(self, volume):
        with np.errstate(divide="ignore", invalid="ignore"):
            level = 1.0 + np.log10(volume) / self._decades
        return np.where(volume > 0, level, 0.0)

    def __repr__(self):
        return f"DecibelScale(dynamic_range={self._dynamic_range})"


class CurveScale(Scale):
    """Easing curve scales (quadratic, sine and s-curve)."""

    def __init__(self, curve: FadeCurve):
        """Initialize the scale.

        Args:
            curve: One of FadeCurve.QUADRATIC, FadeCurve.SINE or FadeCurve.SCURVE
        """
        if curve not in (FadeCurve.QUADRATIC, FadeCurve.SINE, FadeCurve.SCURVE):
            raise InvalidArgument(f"CurveScale does not handle {curve!r}")
        self.curve = FadeCurve(curve)

    def _forward(self, progress):
        if self.curve == FadeCurve.QUADRATIC:
            return np.power(progress, 2)
        elif self.curve == FadeCurve.SINE:
            return np.sin(progress * (np.pi / 2))
        # Smoothstep (3x^2 - 2x^3)
        return progress * progress * (3 - 2 * progress)

    def _inverse(self, volume):
        if self.curve == FadeCurve.QUADRATIC:
            return np.sqrt(volume)
        elif self.curve == FadeCurve.SINE:
            return np.arcsin(volume) * (2 / np.pi)
        # Closed-form inverse of smoothstep on [0, 1]
        return 0.5 - np.sin(np.arcsin(1.0 - 2.0 * volume) / 3.0)

    def __repr__(self):
        return f"CurveScale({self.curve.name})"


def make_scale(curve: FadeCurve = FadeCurve.DEFAULT, dynamic_range: float = DEFAULT_DYNAMIC_RANGE) -> Scale:
    """Build a built-in scale.

    Args:
        curve: FadeCurve enum value (or its name)
        dynamic_range: Range in dB, only used by FadeCurve.DECIBEL
    """
    if isinstance(curve, str):
        try:
            curve = FadeCurve[curve.upper()]
        except KeyError:
            raise InvalidArgument(f"unknown fade curve {curve!r}") from None
    if curve == FadeCurve.LINEAR:
        return LinearScale()
    elif curve == FadeCurve.DECIBEL:
        return DecibelScale(dynamic_range)
    return CurveScale(curve)


def invert_level(scale, volume: float) -> float:
    """Recover the fade-domain level behind a media volume.

    Uses ``scale.inverse`` when the scale provides one. A plain function has no
    inverse, so the raw volume is reinterpreted as the fade-domain level.
    """
    inverse = getattr(scale, "inverse", None)
    if callable(inverse):
        return float(inverse(volume))
    logger.debug("Scale %r has no inverse, using raw volume %s as level", scale, volume)
    return float(volume)
