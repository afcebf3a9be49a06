"""Smooth volume fades for media objects."""

from .core import (  # noqa: F401
    CurveScale,
    DecibelScale,
    FadeCurve,
    FadeRecord,
    FaderConfig,
    InterpolationMode,
    InvalidArgument,
    LinearScale,
    Scale,
    VolumeAdapter,
    get_global_fader_config,
    make_scale,
    set_global_fader_config,
)
from .envelope import apply_fade, fade_envelope  # noqa: F401
from .fader import FaderState, VolumeFader  # noqa: F401
from .schedulers import AsyncioScheduler, IntervalScheduler, ManualClock, ManualScheduler, Scheduler  # noqa: F401

__version__ = "0.1.0"

