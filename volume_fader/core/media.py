"""Media capability checks and adapters.

The fader only needs one thing from a media object: a readable and writable
numeric ``volume`` attribute in [0, 1].
"""

from typing import Callable, Protocol, runtime_checkable

from .exceptions import InvalidArgument
from .validation import check_volume, valid_zero_to_one

__all__ = [
    "MediaVolume",
    "VolumeAdapter",
    "check_media",
]


@runtime_checkable
class MediaVolume(Protocol):
    """Anything with a mutable ``volume`` attribute in [0, 1]."""

    volume: float


def check_media(media):
    """Return media if it exposes a usable ``volume`` attribute.

    The attribute is read, and written back with the value read, so a
    read-only property is rejected here rather than on the first update step.

    Raises:
        InvalidArgument: if the attribute is missing, out of range or read-only
    """
    if media is None:
        raise InvalidArgument("Media object expected, got None")
    try:
        volume = media.volume
    except AttributeError:
        raise InvalidArgument(f"{type(media).__name__} has no volume attribute") from None
    if not valid_zero_to_one(volume):
        raise InvalidArgument(f"{type(media).__name__}.volume must be a number between 0 and 1, got {volume!r}")
    try:
        media.volume = volume
    except AttributeError:
        raise InvalidArgument(f"{type(media).__name__}.volume is not writable") from None
    return media


class VolumeAdapter:
    """Expose a getter/setter pair as a media ``volume`` attribute.

    Useful for players whose volume lives behind methods, e.g. a sound object
    with ``set_volume()`` and a ``volume`` property, or a mixer API with a
    different range. ``scale_factor`` converts between the [0, 1] range used
    here and the player's range (100 for a 0-100 mixer).
    """

    def __init__(self, getter: Callable[[], float], setter: Callable[[float], object], scale_factor: float = 1.0):
        if not callable(getter) or not callable(setter):
            raise InvalidArgument("VolumeAdapter needs a callable getter and setter")
        if not scale_factor > 0:
            raise InvalidArgument(f"scale_factor must be > 0, got {scale_factor!r}")
        self._getter = getter
        self._setter = setter
        self._scale_factor = float(scale_factor)

    @classmethod
    def for_player(cls, player, scale_factor: float = 1.0):
        """Adapt an object exposing ``get_volume()``/``volume`` and ``set_volume()``.

        Raises:
            InvalidArgument: if the player has no callable ``set_volume``
        """
        setter = getattr(player, "set_volume", None)
        if not callable(setter):
            raise InvalidArgument(f"{type(player).__name__} has no set_volume() method")
        getter = getattr(player, "get_volume", None)
        if not callable(getter):

            def getter():
                return player.volume

        return cls(getter, setter, scale_factor)

    @property
    def volume(self) -> float:
        value = self._getter() / self._scale_factor
        # Players with integer ranges may round slightly outside [0, 1]
        return min(1.0, max(0.0, value))

    @volume.setter
    def volume(self, value: float) -> None:
        value = check_volume(value)
        self._setter(value * self._scale_factor)
