"""Fader configuration mixin and process-wide default configuration."""

from ..exceptions import InvalidArgument
from ..fader_config import FaderConfig

__all__ = [
    "FaderConfigMixin",
    "get_global_fader_config",
    "set_global_fader_config",
]

_global_fader_config: FaderConfig = FaderConfig()


def get_global_fader_config() -> FaderConfig:
    """Get the global default fader configuration.

    Returns:
        The current global FaderConfig instance.
    """
    return _global_fader_config


def set_global_fader_config(config: FaderConfig) -> None:
    """Set the global default fader configuration.

    Faders created without an explicit config read their defaults from this
    configuration. Settings already applied to a fader (its fade duration,
    update interval and scale) are not changed retroactively.

    Args:
        config: The new global FaderConfig instance.
    """
    global _global_fader_config
    if not isinstance(config, FaderConfig):
        raise InvalidArgument(f"Expected FaderConfig, got {type(config).__name__}")
    _global_fader_config = config


class FaderConfigMixin:
    """Mixin class for managing fader configuration.

    If no config is provided at construction time, the config property
    returns the current global default (see get_global_fader_config /
    set_global_fader_config).
    """

    def __init__(self, config: FaderConfig | None = None, *args, **kwargs):
        """Initialize the fader configuration.

        Args:
            config: FaderConfig instance, or None to use the global default.
        """
        super().__init__(*args, **kwargs)
        if config is not None and not isinstance(config, FaderConfig):
            raise InvalidArgument(f"Expected FaderConfig, got {type(config).__name__}")
        self._config = config

    @property
    def config(self) -> FaderConfig:
        """Get the fader configuration."""
        if self._config is None:
            return _global_fader_config
        return self._config
