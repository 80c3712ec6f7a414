"""Major tick placement for signed-log axes.

Ticks are described as ``(sign, magnitude)`` pairs whose value is
``sign * base ** magnitude``; ``(0, 0)`` is the zero tick. A raw extent
that crosses zero is split into a negative branch and a positive
branch, and each branch gets log-spaced ticks at a density set by the
interval so both sides read the same number of ticks per decade.
"""
import logging
import math
from typing import List, NamedTuple, Tuple

from .config import ALIGN_TOLERANCE, DEFAULT_BASE, TICK_SAFE_LIMIT
from .number import round_magnitude, round_number
from .transform import safe_log, sign

logger = logging.getLogger(__name__)


class MajorTick(NamedTuple):
    sign: int
    magnitude: float


class AlignedExtent(NamedTuple):
    """Raw extent snapped outward to integer powers of the base."""
    min_exp: int
    max_exp: int
    v_min: float
    v_max: float


def decode(tick: MajorTick, base: float = DEFAULT_BASE) -> float:
    """Numeric value of a tick descriptor."""
    if tick.sign == 0:
        return 0.0
    return tick.sign * base ** tick.magnitude


def decode_ticks(ticks: List[MajorTick], base: float = DEFAULT_BASE) -> List[float]:
    """Decode tick descriptors, re-rounding away pow() noise."""
    return [round_magnitude(decode(tick, base)) for tick in ticks]


def _snap(lg: float, eps: float) -> float:
    """Return the nearest integer if ``lg`` is within ``eps`` of it."""
    nearest = round(lg)
    if abs(lg - nearest) <= eps:
        return nearest
    return lg


def _tolerance(interval: float) -> float:
    if not interval or not math.isfinite(interval):
        return ALIGN_TOLERANCE
    return abs(interval) * ALIGN_TOLERANCE


def align(
    extent: Tuple[float, float],
    interval: float,
    base: float = DEFAULT_BASE
) -> AlignedExtent:
    """
    Snap a raw extent outward to powers of ``base``.

    The bound nearer to zero has its log floored, the far bound has its
    log ceiled; when the range crosses zero both bounds are far bounds.
    A bound already sitting on a power (within tolerance) keeps it, so
    log noise such as log10(1000) == 2.9999999999999996 does not widen
    the range by a decade.
    """
    raw_min, raw_max = extent
    eps = _tolerance(interval)

    def exponent(value: float, outer: bool) -> int:
        if value == 0:
            return 0
        lg = _snap(safe_log(base, value), eps)
        return math.ceil(lg) if outer else math.floor(lg)

    if raw_min >= 0:
        min_exp = exponent(raw_min, outer=False)
        max_exp = exponent(raw_max, outer=True)
    elif raw_max <= 0:
        min_exp = exponent(raw_min, outer=True)
        max_exp = exponent(raw_max, outer=False)
    else:
        min_exp = exponent(raw_min, outer=True)
        max_exp = exponent(raw_max, outer=True)

    v_min = 0.0 if raw_min == 0 else sign(raw_min) * base ** min_exp
    v_max = 0.0 if raw_max == 0 else sign(raw_max) * base ** max_exp
    return AlignedExtent(min_exp, max_exp, v_min, v_max)


def get_wdt(aligned: AlignedExtent) -> Tuple[float, float]:
    """
    Log widths covered on the positive and negative side of an aligned extent.

    Magnitudes below 1 on a branch that reaches zero fall inside the
    linear core and contribute no width.

    Returns:
        (pwdt, nwdt)
    """
    v_min, v_max = aligned.v_min, aligned.v_max

    if v_min < 0 < v_max:
        return max(aligned.max_exp, 0), max(aligned.min_exp, 0)
    if v_min == 0 and v_max == 0:
        return 0, 0
    if v_min >= 0:
        if v_min == 0:
            return max(aligned.max_exp, 0), 0
        return aligned.max_exp - aligned.min_exp, 0
    if v_max == 0:
        return 0, max(aligned.min_exp, 0)
    return 0, aligned.min_exp - aligned.max_exp


def _tick_count(width: float, interval: float) -> int:
    if width <= 0 or not interval or not math.isfinite(interval) or interval < 0:
        return 1
    # Round half up
    num = math.floor(width / interval + 0.5) + 1
    if num > TICK_SAFE_LIMIT:
        logger.warning("Capping %d ticks per branch to %d (interval %s)", num, TICK_SAFE_LIMIT, interval)
        num = TICK_SAFE_LIMIT
    return num


def _branch_ticks(branch_sign: int, lo: float, width: float, num: int) -> List[MajorTick]:
    """Interior ticks stepped linearly in log space from ``lo``."""
    if num <= 2:
        return []
    step = width / (num - 1)
    return [
        MajorTick(branch_sign, math.floor(round_number(lo + i * step)))
        for i in range(1, num - 1)
    ]


def build_major_ticks(
    extent: Tuple[float, float],
    interval: float,
    base: float = DEFAULT_BASE,
    expand: bool = False
) -> List[MajorTick]:
    """
    Build major ticks for a raw (untransformed) extent.

    Args:
        extent: Raw (min, max), may straddle zero
        interval: Tick spacing in log units
        base: Logarithm base
        expand: Use the aligned powers of the base as end ticks instead
            of the raw bounds

    Returns:
        Deduplicated ticks sorted by decoded value
    """
    raw_min, raw_max = extent
    if not (math.isfinite(raw_min) and math.isfinite(raw_max)) or raw_min > raw_max:
        return []

    eps = _tolerance(interval)
    aligned = align(extent, interval, base)

    if raw_min == raw_max:
        pwdt, nwdt = 0, 0
    else:
        pwdt, nwdt = get_wdt(aligned)

    num1 = _tick_count(pwdt, interval)
    num2 = _tick_count(nwdt, interval)

    ticks: List[MajorTick] = []

    if expand:
        ticks.append(MajorTick(sign(aligned.v_min), aligned.min_exp if aligned.v_min else 0))
        ticks.append(MajorTick(sign(aligned.v_max), aligned.max_exp if aligned.v_max else 0))
    else:
        ticks.append(MajorTick(sign(raw_min), _snap(safe_log(base, raw_min), eps)))
        ticks.append(MajorTick(sign(raw_max), _snap(safe_log(base, raw_max), eps)))

    if raw_min * raw_max < 0:
        ticks.append(MajorTick(0, 0))

    # Branches reaching zero start at the edge of the linear core
    positive_lo = aligned.min_exp if raw_min > 0 else 0
    negative_lo = aligned.max_exp if raw_max < 0 else 0
    ticks.extend(_branch_ticks(1, positive_lo, pwdt, num1))
    ticks.extend(_branch_ticks(-1, negative_lo, nwdt, num2))

    return sorted(set(ticks), key=lambda tick: decode(tick, base))
