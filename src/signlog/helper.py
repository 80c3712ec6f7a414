"""Stateless helpers for linear extents and nice intervals."""
import math
from typing import Optional, Tuple, List

from .number import get_precision, nice, round_number


def contain(val: float, extent: Tuple[float, float]) -> bool:
    """Check if ``val`` lies in the closed range ``extent``."""
    return extent[0] <= val <= extent[1]


def normalize(val: float, extent: Tuple[float, float]) -> float:
    """Map ``val`` affinely so that extent[0] -> 0 and extent[1] -> 1."""
    if extent[1] == extent[0]:
        return 0.5
    return (val - extent[0]) / (extent[1] - extent[0])


def scale(val: float, extent: Tuple[float, float]) -> float:
    """Inverse of ``normalize``."""
    return val * (extent[1] - extent[0]) + extent[0]


def get_interval_precision(interval: float) -> int:
    """Decimal places to keep when stepping by ``interval``."""
    return get_precision(interval) + 2


def fix_extent(nice_tick_extent: List[float], extent: Tuple[float, float]) -> List[float]:
    """Clamp a nice tick extent into ``extent``, in place.

    Non-finite bounds fall back to the extent and an inverted result
    collapses onto its upper bound.
    """
    if not math.isfinite(nice_tick_extent[0]):
        nice_tick_extent[0] = extent[0]
    if not math.isfinite(nice_tick_extent[1]):
        nice_tick_extent[1] = extent[1]
    for i in (0, 1):
        nice_tick_extent[i] = min(max(nice_tick_extent[i], extent[0]), extent[1])
    if nice_tick_extent[0] > nice_tick_extent[1]:
        nice_tick_extent[0] = nice_tick_extent[1]
    return nice_tick_extent


def expand_degenerate_extent(extent: List[float], fix_max: bool = False) -> List[float]:
    """Give a zero-width or non-finite extent some room, in place.

    A single non-zero value grows by half its magnitude on each side
    (only downward when the max is fixed), zero becomes [0, 1] and a
    non-finite span resets to [0, 1].
    """
    if extent[0] == extent[1]:
        if extent[0] != 0:
            expand_size = abs(extent[0])
            if not fix_max:
                extent[1] += expand_size / 2
            extent[0] -= expand_size / 2
        else:
            extent[1] = 1

    if not math.isfinite(extent[1] - extent[0]):
        extent[0] = 0
        extent[1] = 1
    return extent


def interval_nice_ticks(
    extent: Tuple[float, float],
    split_number: int,
    min_interval: Optional[float] = None,
    max_interval: Optional[float] = None
) -> Tuple[float, int, List[float]]:
    """
    Compute a nice interval and the tick extent it produces on a linear span.

    Returns:
        - interval
        - interval precision (decimal places)
        - nice tick extent [first tick, last tick]
    """
    span = extent[1] - extent[0]
    interval = nice(span / split_number, round_nearest=True)
    if min_interval is not None and interval < min_interval:
        interval = min_interval
    if max_interval is not None and interval > max_interval:
        interval = max_interval

    precision = get_interval_precision(interval)
    nice_tick_extent = [
        round_number(math.ceil(extent[0] / interval) * interval, precision),
        round_number(math.floor(extent[1] / interval) * interval, precision),
    ]
    fix_extent(nice_tick_extent, extent)
    return interval, precision, nice_tick_extent
