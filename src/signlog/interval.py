"""Linear interval scale: extent tracking and nice linear ticks."""
import logging
import math
from typing import Dict, List, Optional, Tuple, Union

from . import helper
from .config import DEFAULT_SPLIT_NUMBER, TICK_SAFE_LIMIT
from .number import get_precision, round_number

logger = logging.getLogger(__name__)


def add_commas(value: float, precision: int) -> str:
    """Format a number with thousands separators."""
    # -0.0 would render with a sign
    return f"{value + 0.0:,.{precision}f}"


class IntervalScale:
    """Linear scale over an extent, with nice tick computation."""

    type = 'interval'

    def __init__(self, extent: Optional[Tuple[float, float]] = None):
        self._extent = [math.inf, -math.inf]
        self._interval = 0.0
        self._interval_precision = 2
        self._nice_extent: Optional[List[float]] = None
        if extent is not None:
            self.set_extent(extent[0], extent[1])

    def parse(self, val: float) -> float:
        return val

    def contain(self, val: float) -> bool:
        return helper.contain(val, self._extent)

    def normalize(self, val: float) -> float:
        return helper.normalize(val, self._extent)

    def scale(self, val: float) -> float:
        return helper.scale(val, self._extent)

    def get_extent(self) -> Tuple[float, float]:
        return self._extent[0], self._extent[1]

    def set_extent(self, start: float, end: float) -> None:
        """Set the extent; NaN bounds leave the current value in place."""
        if not math.isnan(start):
            self._extent[0] = start
        if not math.isnan(end):
            self._extent[1] = end

    def union_extent(self, other: Tuple[float, float]) -> None:
        """Widen the extent to include ``other``."""
        start, end = self._extent
        if other[0] < start:
            start = other[0]
        if other[1] > end:
            end = other[1]
        self.set_extent(start, end)

    def union_extent_from_data(self, data, dim: str) -> None:
        self.union_extent(data.get_approximate_extent(dim))

    def get_interval(self) -> float:
        return self._interval

    def get_nice_extent(self) -> Optional[Tuple[float, float]]:
        if self._nice_extent is None:
            return None
        return self._nice_extent[0], self._nice_extent[1]

    def get_ticks(self, expand_to_niced_extent: bool = False) -> List[Dict[str, float]]:
        """
        Get ticks on the interval grid.

        Args:
            expand_to_niced_extent: Extend the outermost ticks to the next grid
                step instead of stopping at the extent bounds

        Returns:
            List of ``{"value": v}`` in ascending order
        """
        interval = self._interval
        extent = self._extent
        precision = self._interval_precision
        ticks: List[Dict[str, float]] = []

        if not interval:
            return ticks

        nice_tick_extent = self._nice_extent
        if nice_tick_extent is None:
            nice_tick_extent = [
                round_number(math.ceil(extent[0] / interval) * interval, precision),
                round_number(math.floor(extent[1] / interval) * interval, precision),
            ]

        if extent[0] < nice_tick_extent[0]:
            if expand_to_niced_extent:
                ticks.append({'value': round_number(nice_tick_extent[0] - interval, precision)})
            else:
                ticks.append({'value': extent[0]})

        tick = nice_tick_extent[0]
        while tick <= nice_tick_extent[1]:
            ticks.append({'value': tick})
            tick = round_number(tick + interval, precision)
            if tick == ticks[-1]['value']:
                # Interval too small for the precision; stepping would never advance
                break
            if len(ticks) > TICK_SAFE_LIMIT:
                logger.warning("Interval %s yields more than %d ticks", interval, TICK_SAFE_LIMIT)
                return []

        last_nice_tick = ticks[-1]['value'] if ticks else nice_tick_extent[1]
        if extent[1] > last_nice_tick:
            if expand_to_niced_extent:
                ticks.append({'value': round_number(last_nice_tick + interval, precision)})
            else:
                ticks.append({'value': extent[1]})

        return ticks

    def get_minor_ticks(self, split_number: int) -> List[List[float]]:
        """Subdivide each pair of adjacent ticks into ``split_number`` parts."""
        ticks = self.get_ticks(True)
        extent = self.get_extent()
        minor_ticks = []

        for prev_tick, next_tick in zip(ticks, ticks[1:]):
            minor_interval = (next_tick['value'] - prev_tick['value']) / split_number
            group = []
            for count in range(1, split_number):
                minor_tick = round_number(prev_tick['value'] + count * minor_interval)
                if extent[0] < minor_tick < extent[1]:
                    group.append(minor_tick)
            minor_ticks.append(group)

        return minor_ticks

    def get_label(self, tick: Dict[str, float], precision: Union[int, str, None] = None) -> str:
        """Format a tick value for display.

        ``precision`` of None uses the value's own precision, ``'auto'``
        uses the interval precision.
        """
        if precision is None:
            precision = get_precision(tick['value'])
        elif precision == 'auto':
            precision = self._interval_precision
        value = round_number(tick['value'], precision)
        return add_commas(value, min(max(0, int(precision)), 20))

    def calc_nice_ticks(
        self,
        split_number: Optional[int] = None,
        min_interval: Optional[float] = None,
        max_interval: Optional[float] = None
    ) -> None:
        """Update interval and nice tick extent for the current extent."""
        split_number = split_number or DEFAULT_SPLIT_NUMBER
        extent = self._extent
        span = extent[1] - extent[0]
        if not math.isfinite(span):
            return

        if span < 0:
            extent.reverse()

        interval, precision, nice_extent = helper.interval_nice_ticks(
            extent, split_number, min_interval, max_interval
        )
        self._interval = interval
        self._interval_precision = precision
        self._nice_extent = nice_extent

    def calc_nice_extent(
        self,
        split_number: int = DEFAULT_SPLIT_NUMBER,
        fix_min: bool = False,
        fix_max: bool = False,
        min_interval: Optional[float] = None,
        max_interval: Optional[float] = None
    ) -> None:
        """Round the extent outward to the nice interval grid."""
        extent = self._extent
        helper.expand_degenerate_extent(extent, fix_max)

        self.calc_nice_ticks(split_number, min_interval, max_interval)

        interval = self._interval
        if not fix_min:
            extent[0] = round_number(math.floor(extent[0] / interval) * interval)
        if not fix_max:
            extent[1] = round_number(math.ceil(extent[1] / interval) * interval)
