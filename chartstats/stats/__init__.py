"""
Statistical utilities for chart variants.

This subpackage provides the numerical routines that turn raw observations
into plotted quantities. All functions operate on sequences and numpy arrays
and never touch rendering, I/O or shared state.

Modules:
    regression:
        Pearson correlation, closed-form OLS and a sampled regression line
        with a confidence band for the fitted mean.

    density:
        Gaussian kernel density estimation and type-7 quartiles with Tukey
        whiskers for violin and density charts.

    descriptive:
        Means, standard deviations, normal-approximation confidence
        intervals, histograms and Q-Q plot coordinates.

Design Principle:
    Degenerate data degrades to sentinels (``NaN``, collapsed bands, empty
    lists) rather than exceptions.
"""

from .density import (
    DensityPoint,
    Quartiles,
    calculate_quartiles,
    kernel_density,
    quantile,
    silverman_bandwidth,
)
from .descriptive import (
    HistogramBin,
    QQPoint,
    confidence_interval,
    create_histogram,
    mean,
    qq_plot_data,
    standard_deviation,
)
from .regression import (
    CONFIDENCE_MULTIPLIER,
    BandRow,
    Point2D,
    RegressionModel,
    line_and_band,
    linear_regression,
    ols,
    pearson_r,
    student_t_multiplier,
)

__all__ = [
    "CONFIDENCE_MULTIPLIER",
    "BandRow",
    "Point2D",
    "RegressionModel",
    "line_and_band",
    "linear_regression",
    "ols",
    "pearson_r",
    "student_t_multiplier",
    "DensityPoint",
    "Quartiles",
    "calculate_quartiles",
    "kernel_density",
    "quantile",
    "silverman_bandwidth",
    "HistogramBin",
    "QQPoint",
    "confidence_interval",
    "create_histogram",
    "mean",
    "qq_plot_data",
    "standard_deviation",
]
