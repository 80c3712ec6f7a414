"""Signed logarithmic transform.

Values with ``|x| < 10`` are mapped linearly (``x / 10``) so the
transform is defined through zero; larger magnitudes are mapped to
``sign(x) * log_base(|x|)``. With base 10 the two pieces meet at
``x = ±10``; other bases leave a step at the seam.
"""
import math

from .config import DEFAULT_BASE, LINEAR_THRESHOLD


def sign(x: float) -> int:
    """Sign of ``x`` as -1, 0 or 1."""
    if x > 0:
        return 1
    if x < 0:
        return -1
    return 0


def safe_log(base: float, value: float) -> float:
    """Logarithm of ``|value|``; 0 for a zero argument instead of -inf."""
    if value == 0:
        return 0.0
    return math.log(abs(value)) / math.log(base)


def forward(x: float, base: float = DEFAULT_BASE) -> float:
    """Map a raw value into signed-log space."""
    if -LINEAR_THRESHOLD < x < LINEAR_THRESHOLD:
        return x / LINEAR_THRESHOLD
    return sign(x) * safe_log(base, x)


def inverse(y: float, base: float = DEFAULT_BASE) -> float:
    """Map a signed-log value back to raw units."""
    if -1 < y < 1:
        return y * LINEAR_THRESHOLD
    return sign(y) * base ** abs(y)
