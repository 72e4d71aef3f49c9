"""Equal-interval class breaks for choropleth fills and legends.

``calculate_breaks`` returns one of three result types so that callers must
branch on "no data", "one uniform class" and "five classes" explicitly:

- :class:`NoData` for an empty sample,
- :class:`EmptyBreakSet` when every value is identical,
- :class:`BreakSet` with exactly four ascending interior breaks (strictly
  ascending unless the range is below float resolution at ``max``).
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import pandas as pd

CLASS_COUNT: int = 5
BREAK_DECIMALS: int = 6
# Fill class used when the whole map is one value (middle of the ramp).
UNIFORM_CLASS: int = 2


@dataclass(frozen=True)
class NoData:
    pass


@dataclass(frozen=True)
class EmptyBreakSet:
    min: float
    max: float
    breaks: Tuple[float, ...] = ()


@dataclass(frozen=True)
class BreakSet:
    breaks: Tuple[float, ...]
    min: float
    max: float


BreakResult = Union[NoData, EmptyBreakSet, BreakSet]


def calculate_breaks(values: Sequence[float]) -> BreakResult:
    """Split ``[min, max]`` into five equal-width classes.

    Args:
        values: Finite numeric values, typically from
            :func:`extract_metric_values`.

    Returns:
        BreakResult: ``NoData`` for no values, ``EmptyBreakSet`` when
        ``min == max``, otherwise a ``BreakSet`` whose four interior breaks
        are ``min + k * (max - min) / 5`` for ``k = 1..4``.

    Note:
        Breaks are first rounded to six decimals and any break not strictly
        above its predecessor (starting from ``min``) is dropped. If fewer
        than four survive, all four are recomputed without rounding. Strict
        ascent holds only while the step exceeds the float spacing at
        ``max``; for ranges of a few units around 1e16 the unrounded breaks
        can repeat or equal ``min``.
    """
    vals = [float(v) for v in values]
    if not vals:
        return NoData()

    lo = min(vals)
    hi = max(vals)
    if lo == hi:
        return EmptyBreakSet(min=lo, max=hi)

    step = (hi - lo) / CLASS_COUNT
    rounded = [round(lo + step * k, BREAK_DECIMALS) for k in range(1, CLASS_COUNT)]

    unique: List[float] = []
    last = lo
    for b in rounded:
        if b > last:
            unique.append(b)
            last = b

    if len(unique) < CLASS_COUNT - 1:
        warnings.warn(
            f"Range {hi - lo!r} is too small for rounded breaks; using unrounded values.",
            RuntimeWarning,
            stacklevel=2,
        )
        unique = [lo + step * k for k in range(1, CLASS_COUNT)]

    return BreakSet(breaks=tuple(unique), min=lo, max=hi)


def extract_metric_values(
    features: Iterable[Mapping[str, Any]], metric_id: str
) -> List[float]:
    """Pull one numeric property out of each feature.

    Args:
        features: GeoJSON-like features with a ``properties`` mapping.
        metric_id (str): Property name to read.

    Returns:
        list[float]: Parsed values in input order. Missing, ``None``,
        boolean and unparseable values are dropped silently.
    """
    raw = []
    for feature in features:
        props = feature.get("properties") or {}
        value = props.get(metric_id)
        raw.append(None if isinstance(value, bool) else value)

    numeric = pd.to_numeric(pd.Series(raw, dtype=object), errors="coerce")
    return [float(v) for v in numeric.dropna()]


def classify_value(value: Optional[float], result: BreakResult) -> Optional[int]:
    """Return the fill class index (``0..4``) for a value.

    The index is the number of breaks less than or equal to ``value``, the
    same rule as a step expression over the breaks. ``EmptyBreakSet`` maps
    every value to ``UNIFORM_CLASS``; ``NoData`` and missing values map to
    ``None``.
    """
    if isinstance(result, NoData):
        return None
    if value is None or pd.isna(value):
        return None
    if isinstance(result, EmptyBreakSet):
        return UNIFORM_CLASS
    return sum(1 for b in result.breaks if value >= b)


def legend_ranges(result: BreakResult) -> List[Tuple[float, float]]:
    """Return ``(from, to)`` legend ranges for a break result."""
    if isinstance(result, NoData):
        return []
    if isinstance(result, EmptyBreakSet):
        return [(result.min, result.max)]
    edges = [result.min, *result.breaks, result.max]
    return list(zip(edges[:-1], edges[1:]))
