"""Descriptive statistics behind histograms, error bars and Q-Q plots."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np
from scipy.stats import norm

_Z_SCORES: Dict[float, float] = {0.95: 1.96, 0.99: 2.576}


@dataclass(frozen=True)
class HistogramBin:
    label: str
    count: int
    start: float
    end: float
    mid: float


@dataclass(frozen=True)
class QQPoint:
    theoretical: float
    sample: float


def mean(values: Sequence[float]) -> float:
    arr = np.asarray(values, dtype=float)
    if len(arr) == 0:
        return math.nan
    return float(np.mean(arr))


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation; ``NaN`` for an empty sample."""
    arr = np.asarray(values, dtype=float)
    if len(arr) == 0:
        return math.nan
    return float(np.std(arr))


def confidence_interval(
    values: Sequence[float], confidence: float = 0.95
) -> Dict[str, float]:
    """Normal-approximation interval for the sample mean.

    Args:
        values: Sample values.
        confidence (float, optional): ``0.95`` or ``0.99``; any other level
            uses the 95% z-score.

    Returns:
        dict[str, float]: ``mean``, ``lower``, ``upper`` and ``error`` (the
        half-width). All ``NaN`` for an empty sample.
    """
    arr = np.asarray(values, dtype=float)
    n = len(arr)
    if n == 0:
        return {"mean": math.nan, "lower": math.nan, "upper": math.nan, "error": math.nan}

    avg = float(np.mean(arr))
    z = _Z_SCORES.get(confidence, 1.96)
    error = z * float(np.std(arr)) / math.sqrt(n)
    return {"mean": avg, "lower": avg - error, "upper": avg + error, "error": error}


def create_histogram(
    values: Sequence[float], bins: Optional[int] = None
) -> List[HistogramBin]:
    """Bin values into equal-width classes.

    Args:
        values: Sample values.
        bins (int, optional): Number of bins. Defaults to Sturges' rule,
            ``ceil(log2(n) + 1)``.

    Returns:
        list[HistogramBin]: Empty for an empty sample. The last bin is closed
        on the right; a constant sample puts every value in the first bin.

    Raises:
        ValueError: If ``bins`` is given and less than one.
    """
    arr = np.asarray(values, dtype=float)
    n = len(arr)
    if n == 0:
        return []
    if bins is not None and bins < 1:
        raise ValueError(f"bins must be >= 1, got {bins!r}")

    num_bins = int(bins) if bins is not None else int(math.ceil(math.log2(n) + 1))
    lo = float(np.min(arr))
    hi = float(np.max(arr))
    width = (hi - lo) / num_bins

    if width > 0:
        idx = np.minimum(np.floor((arr - lo) / width).astype(int), num_bins - 1)
    else:
        idx = np.zeros(n, dtype=int)
    counts = np.bincount(idx, minlength=num_bins)

    out = []
    for i in range(num_bins):
        start = lo + i * width
        end = lo + (i + 1) * width
        out.append(
            HistogramBin(
                label=f"{start:.1f}-{end:.1f}",
                count=int(counts[i]),
                start=start,
                end=end,
                mid=(start + end) / 2,
            )
        )
    return out


def qq_plot_data(values: Sequence[float]) -> List[QQPoint]:
    """Pair sorted sample values with standard normal quantiles.

    Plotting positions are ``(i + 0.5) / n``.
    """
    ordered = np.sort(np.asarray(values, dtype=float))
    n = len(ordered)
    if n == 0:
        return []
    positions = (np.arange(n) + 0.5) / n
    theoretical = norm.ppf(positions)
    return [QQPoint(float(t), float(s)) for t, s in zip(theoretical, ordered)]
