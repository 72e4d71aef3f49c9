"""Provide regression utilities used by scatter charts with fitted trend lines.

This module supports:
- Pearson correlation for the chart caption,
- closed-form ordinary least squares fits, and
- a sampled regression line with a confidence band for the fitted mean.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, NamedTuple, Sequence, Tuple

import numpy as np
from scipy.stats import t as student_t

# Approximate two-sided 95% multiplier for moderate-to-large samples.
CONFIDENCE_MULTIPLIER: float = 2.0
DEFAULT_STEPS: int = 120


class Point2D(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class RegressionModel:
    """Closed-form least-squares fit plus the terms needed for a mean band."""

    intercept: float
    slope: float
    residual_std_error: float
    mean_x: float
    sum_sq_centered_x: float
    n: int

    def predict(self, x: float) -> float:
        return self.intercept + self.slope * x


@dataclass(frozen=True)
class BandRow:
    x: float
    y: float
    lower: float
    upper: float


def _as_xy(points: Iterable[Sequence[float]]) -> Tuple[np.ndarray, np.ndarray]:
    arr = np.asarray([tuple(p) for p in points], dtype=float).reshape(-1, 2)
    return arr[:, 0], arr[:, 1]


def pearson_r(points: Iterable[Sequence[float]]) -> float:
    """Return Pearson's correlation coefficient for paired observations.

    Args:
        points: ``Point2D`` values or plain ``(x, y)`` pairs. Callers filter
            non-finite values beforehand.

    Returns:
        float: ``r`` in ``[-1, 1]`` up to rounding, or ``NaN`` when fewer than
        two points are given or either variable has no variance.
    """
    x, y = _as_xy(points)
    n = len(x)
    if n < 2:
        return math.nan
    if np.ptp(x) == 0 or np.ptp(y) == 0:
        return math.nan

    sx = float(np.sum(x))
    sy = float(np.sum(y))
    cov = float(np.sum(x * y)) - sx * sy / n
    vx = float(np.sum(x * x)) - sx * sx / n
    vy = float(np.sum(y * y)) - sy * sy / n
    if vx <= 0 or vy <= 0:
        return math.nan
    return cov / math.sqrt(vx * vy)


def ols(points: Iterable[Sequence[float]]) -> RegressionModel:
    """Fit an ordinary least-squares straight line to paired observations.

    Args:
        points: ``Point2D`` values or plain ``(x, y)`` pairs.

    Returns:
        RegressionModel: Intercept, slope, residual standard error (``n - 2``
        degrees of freedom, floored at one), mean of x and the centered sum
        of squares of x.

    Note:
        With fewer than two points the model is flat through the origin with
        an undefined (``NaN``) residual error. When every x is identical the
        slope is set to zero and the intercept to ``mean(y)``; this is a
        horizontal fit, not a total-least-squares fallback.
    """
    x, y = _as_xy(points)
    n = int(len(x))
    if n < 2:
        return RegressionModel(
            intercept=0.0,
            slope=0.0,
            residual_std_error=math.nan,
            mean_x=math.nan,
            sum_sq_centered_x=math.nan,
            n=n,
        )

    sx = float(np.sum(x))
    sy = float(np.sum(y))
    sxx = float(np.sum(x * x))
    sxy = float(np.sum(x * y))
    denom = n * sxx - sx * sx
    if denom == 0 or np.ptp(x) == 0:
        slope = 0.0
    else:
        slope = (n * sxy - sx * sy) / denom
    intercept = (sy - slope * sx) / n

    resid = y - (intercept + slope * x)
    sse = float(np.sum(resid**2))
    rse = math.sqrt(sse / max(1, n - 2))

    xbar = sx / n
    if np.ptp(x) == 0:
        ssxx = 0.0
    else:
        ssxx = float(np.sum((x - xbar) ** 2))

    return RegressionModel(
        intercept=float(intercept),
        slope=float(slope),
        residual_std_error=rse,
        mean_x=xbar,
        sum_sq_centered_x=ssxx,
        n=n,
    )


def student_t_multiplier(n: int, confidence: float = 0.95) -> float:
    """Return the two-sided Student-t critical value for ``n - 2`` dof.

    Pass the result as ``multiplier`` to :func:`line_and_band` for an exact
    interval instead of the fixed ``CONFIDENCE_MULTIPLIER``. Returns ``NaN``
    when fewer than three points leave no residual degrees of freedom.
    """
    if not 0 < confidence < 1:
        raise ValueError(f"confidence must be in (0, 1), got {confidence!r}")
    dof = int(n) - 2
    if dof < 1:
        return math.nan
    return float(student_t.ppf(0.5 + confidence / 2.0, dof))


def line_and_band(
    points: Iterable[Sequence[float]],
    x_min: float,
    x_max: float,
    steps: int = DEFAULT_STEPS,
    multiplier: float = CONFIDENCE_MULTIPLIER,
) -> Tuple[List[Point2D], List[BandRow]]:
    """Sample the fitted line and its confidence band over ``[x_min, x_max]``.

    Args:
        points: Observations the line is fitted to.
        x_min (float): First grid value.
        x_max (float): Last grid value (inclusive).
        steps (int, optional): Number of intervals; ``steps + 1`` rows are
            produced. Defaults to ``120``.
        multiplier (float, optional): Half-width multiplier applied to the
            standard error of the fitted mean. Defaults to
            ``CONFIDENCE_MULTIPLIER``.

    Returns:
        tuple[list[Point2D], list[BandRow]]: The line and the band sampled on
        the same x grid.

    Raises:
        ValueError: If ``steps`` is less than one.

    Note:
        Where the standard error of the fit is undefined (too few points, no
        spread in x) the band collapses onto the line.
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps!r}")

    model = ols(points)
    xs = x_min + (np.arange(steps + 1) * (x_max - x_min)) / steps
    ys = model.intercept + model.slope * xs

    se = model.residual_std_error
    ssxx = model.sum_sq_centered_x
    if math.isfinite(se) and math.isfinite(ssxx) and ssxx > 0 and model.n > 0:
        se_fit = se * np.sqrt(1.0 / model.n + (xs - model.mean_x) ** 2 / ssxx)
    else:
        se_fit = np.full_like(xs, np.nan)

    finite = np.isfinite(se_fit) & math.isfinite(multiplier)
    half = np.where(finite, multiplier * np.where(finite, se_fit, 0.0), 0.0)
    lower = ys - half
    upper = ys + half

    line = [Point2D(float(x), float(y)) for x, y in zip(xs, ys)]
    band = [
        BandRow(x=float(x), y=float(y), lower=float(lo), upper=float(hi))
        for x, y, lo, hi in zip(xs, ys, lower, upper)
    ]
    return line, band


def linear_regression(x: Sequence[float], y: Sequence[float]) -> Dict[str, object]:
    """Fit a least-squares line to separate x/y arrays with residual diagnostics.

    Args:
        x: Independent-variable values.
        y: Dependent-variable values, paired with ``x`` by position.

    Returns:
        dict[str, object]: ``slope``, ``intercept``, ``r_squared``,
        ``residuals`` and ``fitted`` (numpy arrays) and ``n``.

    Note:
        Empty or length-mismatched input returns a zero model with empty
        arrays. No spread in ``x`` gives a zero slope; no spread in ``y``
        gives ``r_squared == 0``.
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    n = int(len(x_arr))
    if n == 0 or n != len(y_arr):
        return {
            "slope": 0.0,
            "intercept": 0.0,
            "r_squared": 0.0,
            "residuals": np.array([], dtype=float),
            "fitted": np.array([], dtype=float),
            "n": 0,
        }

    xbar = float(np.mean(x_arr))
    ybar = float(np.mean(y_arr))
    num = float(np.sum((x_arr - xbar) * (y_arr - ybar)))
    den = float(np.sum((x_arr - xbar) ** 2))
    slope = num / den if den != 0 else 0.0
    intercept = ybar - slope * xbar

    fitted = slope * x_arr + intercept
    resid = y_arr - fitted
    ss_res = float(np.sum(resid**2))
    ss_tot = float(np.sum((y_arr - ybar) ** 2))
    r2 = 1.0 - ss_res / ss_tot if ss_tot != 0 else 0.0

    return {
        "slope": float(slope),
        "intercept": float(intercept),
        "r_squared": float(r2),
        "residuals": resid,
        "fitted": fitted,
        "n": n,
    }
