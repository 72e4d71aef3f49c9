"""
Display formatting for metric values, legend ranges and correlation captions.
"""

from __future__ import annotations

import math
from typing import Optional

NO_DATA = "No data"


# Halves go away from zero, so -2.5 renders as "-3" (JavaScript Math.round gives "-2").
def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _is_missing(value: Optional[float]) -> bool:
    if value is None:
        return True
    try:
        return math.isnan(float(value))
    except (TypeError, ValueError):
        return True


def format_metric_value(value: Optional[float], fmt: str) -> str:
    """
    Format a metric value for a legend or tooltip.

    fmt:
      - "percent": one decimal place and a percent sign, e.g. "12.3%"
      - "currency": US dollars without cents, e.g. "$1,235" or "-$1,235"
      - "number": rounded to an integer with thousands separators
      - anything else: ``str(value)``

    Missing and NaN values render as "No data".
    """
    if _is_missing(value):
        return NO_DATA

    v = float(value)
    if fmt == "percent":
        return f"{v:.1f}%"
    if fmt == "currency":
        whole = _round_half_away(v)
        sign = "-" if whole < 0 else ""
        return f"{sign}${abs(whole):,}"
    if fmt == "number":
        return f"{_round_half_away(v):,}"
    return str(value)


def format_range(lower: Optional[float], upper: Optional[float], fmt: str) -> str:
    return f"{format_metric_value(lower, fmt)} - {format_metric_value(upper, fmt)}"


def format_correlation(r: float, digits: int = 2) -> str:
    if _is_missing(r):
        return "r = n/a"
    return f"r = {float(r):.{digits}f}"
