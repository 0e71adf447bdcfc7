"""
Numeric coercion helpers shared by every calculator.

Inputs arrive from form fields and JSON bodies, so any of them may be blank,
non-numeric, NaN, infinite or negative. None of the calculators fail on such
input: values are coerced to a safe number and then clamped into range.

Helpers:
- coerce_number: float conversion with a fallback for anything unusable
- clamp: bound a value below (and optionally above)
- ceil_to_cents: round a dollar amount up to the next whole cent
- safe_divide: division that returns 0.0 for a zero or non-finite denominator
"""

import math
from typing import Any, Optional


def coerce_number(value: Any, default: float = 0.0) -> float:
    """
    Convert a raw input value to a finite float.

    Strings are parsed ("12.5" -> 12.5). Blank strings, None, booleans,
    unparseable values, integers too large for a float, NaN and +/-inf all
    return ``default``.

    Args:
        value: Raw input value.
        default: Value returned when ``value`` is not a usable number.

    Returns:
        A finite float.
    """
    if value is None or isinstance(value, bool):
        return default

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default

    if not math.isfinite(number):
        return default
    return number


def clamp(value: float, lower: float, upper: Optional[float] = None) -> float:
    """Bound ``value`` to ``[lower, upper]`` (no upper bound when None)."""
    if upper is not None:
        value = min(upper, value)
    return max(lower, value)


def ceil_to_cents(value: float) -> float:
    """
    Round a dollar amount up to the nearest cent.

    Always rounds up so a minimum fare never falls below the driver's floor.
    """
    return math.ceil(value * 100) / 100


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 when the denominator is zero or not finite."""
    if denominator == 0 or not math.isfinite(denominator):
        return 0.0
    return numerator / denominator
