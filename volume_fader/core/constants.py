"""Default values for the volume-fader library."""

# Fade duration applied to new fades, in milliseconds
DEFAULT_FADE_DURATION = 500.0

# Tick period of interval-driven schedulers, in milliseconds
DEFAULT_UPDATE_INTERVAL = 50.0

# Dynamic range of the default decibel scale: 60 dB spans three decades,
# so the quietest non-silent output is 10^-3
DEFAULT_DYNAMIC_RANGE = 60.0

# Decibels per decade of amplitude
DB_PER_DECADE = 20.0

# Frame period of frame-style schedulers, in seconds (~60 fps)
DEFAULT_FRAME_INTERVAL = 1 / 60

MIN_VOLUME = 0.0
MAX_VOLUME = 1.0

__all__ = [
    "DEFAULT_FADE_DURATION",
    "DEFAULT_UPDATE_INTERVAL",
    "DEFAULT_DYNAMIC_RANGE",
    "DB_PER_DECADE",
    "DEFAULT_FRAME_INTERVAL",
    "MIN_VOLUME",
    "MAX_VOLUME",
]
