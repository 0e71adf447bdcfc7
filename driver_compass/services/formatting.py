"""
Display formatting helpers shared by all calculators.

Monetary values stay full-precision floats inside results; these helpers only
produce the strings shown to a driver. Non-finite values render as an em dash.
"""

import math

MISSING = "—"


def format_currency(value: float, digits: int = 2) -> str:
    """
    Format a dollar amount, e.g. ``1600 -> "$1,600.00"``, ``-5 -> "-$5.00"``.

    Monthly totals are usually shown with ``digits=0``.
    """
    if value is None or not math.isfinite(value):
        return MISSING
    sign = "-" if round(value, digits) < 0 else ""
    return f"{sign}${abs(value):,.{digits}f}"


def format_number(value: float, digits: int = 2) -> str:
    """Fixed-point string, or an em dash for non-finite values."""
    if value is None or not math.isfinite(value):
        return MISSING
    return f"{value:.{digits}f}"


def format_margin(offer: float, required: float) -> str:
    """``"+$1.00 over"`` when the offer covers ``required``, else ``"-$0.10 short"``."""
    if offer >= required:
        return f"+${offer - required:.2f} over"
    return f"-${required - offer:.2f} short"
