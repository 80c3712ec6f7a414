"""Signed logarithmic axis scale."""
import logging
import math
from typing import Dict, List, Optional, Tuple, Type, Union

from . import helper
from .config import (
    DEFAULT_APPROX_TICK_NUM,
    DEFAULT_BASE,
    DEFAULT_SPLIT_NUMBER,
    LINEAR_THRESHOLD,
)
from .interval import IntervalScale
from .number import get_precision, quantity, round_magnitude, round_number
from .ticks import build_major_ticks, decode_ticks
from .transform import forward, inverse, safe_log

logger = logging.getLogger(__name__)

_scale_classes: Dict[str, Type] = {}


def register_scale(cls: Type) -> Type:
    """Register a scale class under its ``type`` name."""
    _scale_classes[cls.type] = cls
    return cls


def get_scale_class(type_name: str) -> Type:
    """Look up a registered scale class by type name."""
    if type_name not in _scale_classes:
        valid = ', '.join(sorted(_scale_classes))
        raise ValueError(f"Unknown scale type: {type_name}. Valid types: {valid}")
    return _scale_classes[type_name]


def fix_rounding_error(val: float, original_val: float) -> float:
    """Round ``val`` to the decimal precision of ``original_val``.

    Example: fix_rounding_error(0.30000000000000004, 0.3) -> 0.3
    """
    return round_number(val, get_precision(original_val))


register_scale(IntervalScale)


@register_scale
class SignLogScale:
    """
    Axis scale that is logarithmic on both sides of zero.

    The raw extent is tracked by an ``IntervalScale`` so tick alignment
    and rounding fixes can go back to the observed values; a second
    ``IntervalScale`` stores the extent in signed-log space and answers
    the linear queries (contain, normalize, scale, labels).

    Args:
        base: Logarithm base
        reproject_small_extent: Spread extents lying entirely within
            (-10, 10) through a further logarithm
        linear_band: Use linear nice ticks when the raw extent lies
            entirely within (-10, 10)
    """

    type = 'signlog'

    def __init__(
        self,
        base: float = DEFAULT_BASE,
        reproject_small_extent: bool = False,
        linear_band: bool = True
    ):
        if base <= 1:
            raise ValueError(f"Invalid base: {base}. Base must be greater than 1")
        self.base = base
        self.reproject_small_extent = reproject_small_extent
        self.linear_band = linear_band

        self._original_scale = IntervalScale()
        self._extent_scale = IntervalScale()
        self._fix_min = False
        self._fix_max = False
        self._interval = 0.0
        self._nice_extent: Optional[Tuple[float, float]] = None

    # Transform

    def signed_log_transform(self, val: float) -> float:
        return forward(val, self.base)

    def signed_log_inv_transform(self, val: float) -> float:
        return inverse(val, self.base)

    def _transform_extent(self, start: float, end: float) -> Tuple[float, float]:
        start = self.signed_log_transform(start)
        end = self.signed_log_transform(end)

        if self.reproject_small_extent and -1 < start < 1 and -1 < end < 1:
            log_start = safe_log(self.base, start)
            log_end = safe_log(self.base, end)
            same_sign = start * end > 0
            start, end = (
                min(log_start, log_end),
                max(log_start, log_end) if same_sign else 0,
            )
        return start, end

    def _is_reprojected(self) -> bool:
        if not self.reproject_small_extent:
            return False
        raw_min, raw_max = self._original_scale.get_extent()
        return (-LINEAR_THRESHOLD < raw_min < LINEAR_THRESHOLD
                and -LINEAR_THRESHOLD < raw_max < LINEAR_THRESHOLD)

    def _in_linear_band(self) -> bool:
        if not self.linear_band or self._is_reprojected():
            return False
        raw_min, raw_max = self._original_scale.get_extent()
        return -LINEAR_THRESHOLD < raw_min < raw_max < LINEAR_THRESHOLD

    def _query_extent(self) -> Tuple[float, float]:
        start, end = self._extent_scale.get_extent()
        if self._is_reprojected() and self._original_scale.get_extent()[1] < 0:
            # Log of magnitudes runs backwards for negative values
            return end, start
        return start, end

    def _project(self, val: float) -> float:
        val = self.signed_log_transform(val)
        if self._is_reprojected():
            val = safe_log(self.base, val)
        return val

    # Extent

    def get_raw_extent(self) -> Tuple[float, float]:
        """Raw extent exactly as observed through set/union calls."""
        return self._original_scale.get_extent()

    def set_extent(self, start: float, end: float) -> None:
        self._original_scale.set_extent(start, end)
        start, end = self._transform_extent(start, end)
        logger.debug("set_extent: transformed extent (%s, %s)", start, end)
        self._extent_scale.set_extent(start, end)

    def get_extent(self) -> Tuple[float, float]:
        """Extent in raw units, with fix flags applied to the flagged bounds."""
        original_extent = self._original_scale.get_extent()
        if self._is_reprojected():
            extent = list(original_extent)
        else:
            start, end = self._extent_scale.get_extent()
            extent = [self.signed_log_inv_transform(start), self.signed_log_inv_transform(end)]

        if self._fix_min:
            extent[0] = fix_rounding_error(extent[0], original_extent[0])
        if self._fix_max:
            extent[1] = fix_rounding_error(extent[1], original_extent[1])
        return extent[0], extent[1]

    def union_extent(self, extent: Tuple[float, float]) -> None:
        self._original_scale.union_extent(extent)
        if self.reproject_small_extent:
            # Re-projection depends on the whole raw extent
            self._extent_scale.set_extent(*self._transform_extent(*self._original_scale.get_extent()))
        else:
            self._extent_scale.union_extent(self._transform_extent(extent[0], extent[1]))

    def union_extent_from_data(self, data, dim: str) -> None:
        # Non-positive values are kept; the scale is defined through zero
        self.union_extent(data.get_approximate_extent(dim))

    # Nice interval and extent

    def get_interval(self) -> float:
        return self._interval

    def get_nice_extent(self) -> Optional[Tuple[float, float]]:
        return self._nice_extent

    def calc_nice_ticks(
        self,
        approx_tick_num: Optional[int] = None,
        min_interval: Optional[float] = None,
        max_interval: Optional[float] = None
    ) -> None:
        """
        Update interval and nice extent for the current transformed extent.

        Args:
            approx_tick_num: Approximate tick count (default 10)
            min_interval: Lower bound for the interval, in transformed units
            max_interval: Upper bound for the interval, in transformed units
        """
        approx_tick_num = approx_tick_num or DEFAULT_APPROX_TICK_NUM

        if self._in_linear_band():
            # The transform is linear here; plain linear nice ticks space better
            self._extent_scale.calc_nice_ticks(approx_tick_num, min_interval, max_interval)
            self._interval = self._extent_scale.get_interval()
            self._nice_extent = self._extent_scale.get_nice_extent()
            logger.debug("calc_nice_ticks: linear interval %s", self._interval)
            return

        start, end = self._extent_scale.get_extent()
        span = end - start
        if not math.isfinite(span) or span <= 0:
            logger.debug("calc_nice_ticks: skipping span %s", span)
            return

        interval = quantity(span)
        err = approx_tick_num / span * interval

        # Too many ticks otherwise
        if err <= 0.5:
            interval *= 10

        # Interval must be integer so ticks land on whole powers
        while not math.isnan(interval) and 0 < abs(interval) < 1:
            interval *= 10

        if min_interval is not None and interval < min_interval:
            interval = min_interval
        if max_interval is not None and interval > max_interval:
            interval = max_interval

        self._interval = interval
        self._nice_extent = (
            round_number(math.ceil(start / interval) * interval),
            round_number(math.floor(end / interval) * interval),
        )
        logger.debug("calc_nice_ticks: interval %s, nice extent %s", interval, self._nice_extent)

    def calc_nice_extent(
        self,
        split_number: int = DEFAULT_SPLIT_NUMBER,
        fix_min: bool = False,
        fix_max: bool = False,
        min_interval: Optional[float] = None,
        max_interval: Optional[float] = None
    ) -> None:
        """Round the transformed extent outward to the nice interval grid.

        Bounds flagged with ``fix_min``/``fix_max`` keep their observed
        value and are reported back at the observed precision.
        """
        extent = list(self._extent_scale.get_extent())
        helper.expand_degenerate_extent(extent, fix_max)
        self._extent_scale.set_extent(extent[0], extent[1])

        self.calc_nice_ticks(split_number, min_interval, max_interval)

        interval = self._interval
        if interval:
            if not fix_min:
                extent[0] = round_number(math.floor(extent[0] / interval) * interval)
            if not fix_max:
                extent[1] = round_number(math.ceil(extent[1] / interval) * interval)
            self._extent_scale.set_extent(extent[0], extent[1])

        self._fix_min = fix_min
        self._fix_max = fix_max

    # Ticks

    def get_ticks(self, expand_to_niced_extent: bool = False) -> List[Dict[str, float]]:
        """
        Get major ticks in raw units.

        Args:
            expand_to_niced_extent: End on the enclosing powers of the base
                rather than on the raw extent bounds

        Returns:
            List of ``{"value": v}`` in ascending order
        """
        raw_extent = self._original_scale.get_extent()
        if not (math.isfinite(raw_extent[0]) and math.isfinite(raw_extent[1])):
            return []

        if self._in_linear_band():
            values = [
                round_magnitude(self.signed_log_inv_transform(tick['value']))
                for tick in self._extent_scale.get_ticks(expand_to_niced_extent)
            ]
        else:
            major_ticks = build_major_ticks(raw_extent, self._interval, self.base, expand_to_niced_extent)
            values = decode_ticks(major_ticks, self.base)

        # Outermost ticks sit on the raw bounds unless expanded
        if values and self._fix_min and not expand_to_niced_extent:
            values[0] = fix_rounding_error(values[0], raw_extent[0])
        if values and self._fix_max and not expand_to_niced_extent:
            values[-1] = fix_rounding_error(values[-1], raw_extent[1])

        return [{'value': value} for value in values]

    def get_minor_ticks(self, split_number: int) -> List[List[float]]:
        """Split each gap between major ticks evenly in signed-log space."""
        ticks = self.get_ticks(True)
        raw_min, raw_max = self._original_scale.get_extent()
        minor_ticks = []

        for prev_tick, next_tick in zip(ticks, ticks[1:]):
            start = self.signed_log_transform(prev_tick['value'])
            end = self.signed_log_transform(next_tick['value'])
            step = (end - start) / split_number
            group = []
            for count in range(1, split_number):
                minor_tick = round_magnitude(self.signed_log_inv_transform(start + count * step))
                if raw_min < minor_tick < raw_max:
                    group.append(minor_tick)
            minor_ticks.append(group)

        return minor_ticks

    def get_label(self, tick: Dict[str, float], precision: Union[int, str, None] = None) -> str:
        return self._extent_scale.get_label(tick, precision)

    # Point queries

    def parse(self, val: float) -> float:
        return val

    def contain(self, val: float) -> bool:
        start, end = self._query_extent()
        return helper.contain(self._project(val), (min(start, end), max(start, end)))

    def normalize(self, val: float) -> float:
        return helper.normalize(self._project(val), self._query_extent())

    def scale(self, val: float) -> float:
        val = helper.scale(val, self._query_extent())
        if self._is_reprojected():
            negative = self._original_scale.get_extent()[1] < 0
            val = (-1 if negative else 1) * self.base ** val
        return self.signed_log_inv_transform(val)
