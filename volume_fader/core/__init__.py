"""Core classes for the volume-fader library.

This module contains the value types, scales, validation helpers and mixins
used by the fader.
"""

from .constants import DEFAULT_DYNAMIC_RANGE, DEFAULT_FADE_DURATION, DEFAULT_UPDATE_INTERVAL
from .exceptions import InvalidArgument
from .fade_record import FadeRecord
from .fader_config import FaderConfig, InterpolationMode
from .media import MediaVolume, VolumeAdapter, check_media
from .mixins import (
    FadeMixin,
    FaderConfigMixin,
    get_global_fader_config,
    set_global_fader_config,
)
from .scale import CurveScale, DecibelScale, FadeCurve, LinearScale, Scale, invert_level, make_scale

__all__ = [
    "DEFAULT_DYNAMIC_RANGE",
    "DEFAULT_FADE_DURATION",
    "DEFAULT_UPDATE_INTERVAL",
    "InvalidArgument",
    "FadeRecord",
    "FaderConfig",
    "InterpolationMode",
    "MediaVolume",
    "VolumeAdapter",
    "check_media",
    "FaderConfigMixin",
    "FadeMixin",
    "get_global_fader_config",
    "set_global_fader_config",
    "FadeCurve",
    "Scale",
    "LinearScale",
    "DecibelScale",
    "CurveScale",
    "make_scale",
    "invert_level",
]
