"""Kernel density estimation and box-plot quartiles for distribution charts.

Density curves and quartile overlays are computed side by side on the same
sample by violin and density charts; neither function depends on the other.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

SILVERMAN_FACTOR: float = 1.06
DEFAULT_BANDWIDTH: float = 1.0
DEFAULT_GRID_SIZE: int = 100
GRID_PADDING: float = 0.1
IQR_FENCE: float = 1.5

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


@dataclass(frozen=True)
class DensityPoint:
    x: float
    density: float


@dataclass(frozen=True)
class Quartiles:
    """Type-7 quartiles with Tukey whiskers.

    Attributes:
        q1, median, q3: Linear-interpolation quartiles of the sample.
        lower_whisker, upper_whisker: Most extreme values inside the
            ``1.5 * IQR`` fences.
        iqr: ``q3 - q1``.
        outliers: Sorted values outside the fences.
    """

    q1: float
    median: float
    q3: float
    lower_whisker: float
    upper_whisker: float
    iqr: float
    outliers: Tuple[float, ...] = field(default_factory=tuple)


def silverman_bandwidth(sample: Sequence[float]) -> float:
    """Return Silverman's rule-of-thumb bandwidth ``1.06 * sigma * n**(-1/5)``.

    ``sigma`` is the population standard deviation. Returns ``NaN`` for an
    empty sample and ``0.0`` when every value is identical.
    """
    arr = np.asarray(sample, dtype=float)
    n = len(arr)
    if n == 0:
        return math.nan
    return float(SILVERMAN_FACTOR * np.std(arr) * n ** (-1.0 / 5.0))


def kernel_density(
    sample: Sequence[float],
    bandwidth: Optional[float] = None,
    grid_size: int = DEFAULT_GRID_SIZE,
) -> List[DensityPoint]:
    """Estimate a smooth density curve with a Gaussian kernel.

    Args:
        sample: Observed values. Callers drop non-finite values beforehand.
        bandwidth (float, optional): Kernel width. When omitted, Silverman's
            rule is used, falling back to ``DEFAULT_BANDWIDTH`` if the rule
            gives a zero or undefined width.
        grid_size (int, optional): Number of evaluation points. Defaults to
            ``100``.

    Returns:
        list[DensityPoint]: ``grid_size`` points spanning the sample range
        padded by 10% on each side, or an empty list for an empty sample.

    Raises:
        ValueError: If ``grid_size < 2`` or a supplied bandwidth is not a
            positive finite number.
    """
    if grid_size < 2:
        raise ValueError(f"grid_size must be >= 2, got {grid_size!r}")
    if bandwidth is not None and not (math.isfinite(bandwidth) and bandwidth > 0):
        raise ValueError(f"bandwidth must be positive and finite, got {bandwidth!r}")

    data = np.asarray(sample, dtype=float)
    n = len(data)
    if n == 0:
        return []

    bw = silverman_bandwidth(data) if bandwidth is None else float(bandwidth)
    if not math.isfinite(bw) or bw <= 0:
        warnings.warn(
            f"Rule-of-thumb bandwidth is {bw!r} (no spread in sample); "
            f"using {DEFAULT_BANDWIDTH}.",
            RuntimeWarning,
            stacklevel=2,
        )
        bw = DEFAULT_BANDWIDTH

    lo = float(np.min(data))
    hi = float(np.max(data))
    span = hi - lo
    padding = span * GRID_PADDING if span > 0 else 3.0 * bw

    xs = (lo - padding) + ((span + 2 * padding) * np.arange(grid_size)) / (grid_size - 1)
    u = (xs[:, None] - data[None, :]) / bw
    density = np.sum(np.exp(-0.5 * u * u), axis=1) * _INV_SQRT_2PI / (n * bw)

    return [DensityPoint(x=float(x), density=float(d)) for x, d in zip(xs, density)]


def quantile(sorted_values: Sequence[float], p: float) -> float:
    """Return the type-7 quantile of pre-sorted values.

    ``p`` is clamped to ``[0, 1]``. The input must be non-empty.
    """
    if p <= 0:
        return float(sorted_values[0])
    if p >= 1:
        return float(sorted_values[-1])
    index = (len(sorted_values) - 1) * p
    lower = math.floor(index)
    upper = math.ceil(index)
    weight = index - lower
    return float(sorted_values[lower] * (1 - weight) + sorted_values[upper] * weight)


def calculate_quartiles(sample: Sequence[float]) -> Quartiles:
    """Compute box-plot quartiles, whiskers and outliers.

    Args:
        sample: Non-empty sequence of finite values. Calling this on an empty
            sample is a precondition violation and raises from numpy.

    Returns:
        Quartiles: ``q1 <= median <= q3``; a single value yields three equal
        quartiles and a zero IQR.
    """
    ordered = np.sort(np.asarray(sample, dtype=float))
    q1, median, q3 = (float(q) for q in np.quantile(ordered, [0.25, 0.5, 0.75]))
    iqr = q3 - q1

    lower_fence = q1 - IQR_FENCE * iqr
    upper_fence = q3 + IQR_FENCE * iqr
    inside = (ordered >= lower_fence) & (ordered <= upper_fence)
    kept = ordered[inside]
    if len(kept) == 0:
        kept = ordered

    return Quartiles(
        q1=q1,
        median=median,
        q3=q3,
        lower_whisker=float(kept[0]),
        upper_whisker=float(kept[-1]),
        iqr=iqr,
        outliers=tuple(float(v) for v in ordered[~inside]),
    )
