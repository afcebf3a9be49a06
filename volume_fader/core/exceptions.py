"""Exceptions raised by the volume-fader library."""

__all__ = [
    "InvalidArgument",
]


class InvalidArgument(ValueError, TypeError):
    """Raised when a caller supplies an unusable value.

    Covers out-of-range volumes, non-positive durations or intervals, media
    objects without a usable ``volume`` attribute and non-callable callbacks.
    Always raised synchronously by the call that received the value.
    """
