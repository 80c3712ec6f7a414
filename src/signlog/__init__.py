__version__ = "0.1.0"

from .transform import (
    forward,
    inverse,
    safe_log,
)
from .interval import IntervalScale
from .scale import (
    SignLogScale,
    fix_rounding_error,
    get_scale_class,
    register_scale,
)
from .ticks import (
    MajorTick,
    build_major_ticks,
    decode_ticks,
)
from .data import SeriesData

__all__ = [
    "forward",
    "inverse",
    "safe_log",
    "IntervalScale",
    "SignLogScale",
    "fix_rounding_error",
    "get_scale_class",
    "register_scale",
    "MajorTick",
    "build_major_ticks",
    "decode_ticks",
    "SeriesData",
]
