"""Numeric helpers shared by the linear and signed-log scales."""
import math
from typing import Union

from .config import DEFAULT_ROUND_PRECISION


def round_number(x: float, precision: int = DEFAULT_ROUND_PRECISION) -> float:
    """Round to a fixed number of decimals, clamped into [0, 20]."""
    precision = min(max(0, int(precision)), 20)
    if not math.isfinite(x):
        return x
    return round(float(x), precision)


def round_magnitude(x: float, digits: int = DEFAULT_ROUND_PRECISION) -> float:
    """Round away float noise relative to the magnitude of ``x``.

    Keeps at least ``digits`` decimals, and ``digits`` more below the
    leading digit for magnitudes under 1, so 1e-12 stays 1e-12.
    """
    x = float(x)
    if x == 0 or not math.isfinite(x):
        return x
    exponent = math.floor(math.log10(abs(x)))
    return round(x, max(digits, digits - exponent))


def get_precision(val: Union[float, int, str]) -> int:
    """Get the number of decimal places needed to write ``val``.

    Examples:
        1 -> 0
        0.3 -> 1
        1.25 -> 2
        1e-7 -> 7
    """
    try:
        val = float(val)
    except (ValueError, TypeError):
        return 0
    if math.isnan(val):
        return 0

    # Fast path: probe by scaling
    if val > 1e-14:
        e = 1
        for i in range(15):
            if round(val * e) / e == val:
                return i
            e *= 10

    return get_precision_safe(val)


def get_precision_safe(val: float) -> int:
    """Get decimal places by reading the textual representation."""
    text = repr(float(val)).lower()
    e_index = text.find('e')
    exp = int(text[e_index + 1:]) if e_index > 0 else 0
    significand_len = e_index if e_index > 0 else len(text)
    dot_index = text.find('.')
    decimal_len = 0 if dot_index < 0 else significand_len - 1 - dot_index
    # "1.0" reads as one decimal place but is an integer
    if decimal_len == 1 and text[dot_index + 1:significand_len] == '0':
        decimal_len = 0
    return max(0, decimal_len - exp)


def quantity_exponent(val: float) -> int:
    """Exponent of the order of magnitude of ``val``."""
    if val == 0:
        return 0
    exp = math.floor(math.log10(val))
    # log10 may land just below an integer, e.g. log10(1000) noise
    if val / 10 ** exp >= 10:
        exp += 1
    return exp


def quantity(val: float) -> float:
    """Order of magnitude of ``val`` as a power of ten (e.g. 2.9 -> 1, 340 -> 100)."""
    return 10 ** quantity_exponent(val)


def nice(val: float, round_nearest: bool = False) -> float:
    """Snap ``val`` to a nice number: 1, 2, 3, 5 or 10 times a power of ten.

    Args:
        val: Positive number to snap
        round_nearest: Round to the closest nice number instead of taking the ceiling

    Returns:
        The nice number
    """
    exponent = quantity_exponent(val)
    exp10 = 10.0 ** exponent
    f = val / exp10

    if round_nearest:
        if f < 1.5:
            nf = 1
        elif f < 2.5:
            nf = 2
        elif f < 4:
            nf = 3
        elif f < 7:
            nf = 5
        else:
            nf = 10
    else:
        if f < 1:
            nf = 1
        elif f < 2:
            nf = 2
        elif f < 3:
            nf = 3
        elif f < 5:
            nf = 5
        else:
            nf = 10

    result = nf * exp10
    if exponent >= -20:
        result = round(result, -exponent if exponent < 0 else 0)
    return result

