"""Mixin classes for the volume-fader library.

This package provides reusable mixins for fader configuration and
fade record management.
"""

from .config import FaderConfigMixin, get_global_fader_config, set_global_fader_config
from .fade import FadeMixin

__all__ = [
    "FaderConfigMixin",
    "FadeMixin",
    "get_global_fader_config",
    "set_global_fader_config",
]
