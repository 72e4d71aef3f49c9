"""
A Python package for deriving plotted quantities from raw chart observations.

Computes regression lines with confidence bands, correlation, density curves,
quartiles, choropleth class breaks and subgroup comparisons for chart
components that render the results.

Modules:
    - stats: Regression, kernel density, quartiles and descriptive statistics.
    - classification: Equal-interval choropleth breaks and metric extraction.
    - comparison: Most divergent subgroup pair selection.
    - formatting: Display strings for metric values and captions.
    - output: DataFrame conversion and CSV export of results.
"""

__version__ = "1.0.0"

from .classification import (
    BreakResult,
    BreakSet,
    EmptyBreakSet,
    NoData,
    calculate_breaks,
    classify_value,
    extract_metric_values,
    legend_ranges,
)
from .comparison import find_most_divergent_pair, subgroup_means
from .formatting import format_correlation, format_metric_value, format_range
from .output import band_frame, breaks_frame, density_frame, save_tables_to_csv
from .stats import (
    BandRow,
    DensityPoint,
    Point2D,
    Quartiles,
    RegressionModel,
    calculate_quartiles,
    kernel_density,
    line_and_band,
    ols,
    pearson_r,
)

__all__ = [
    # Regression
    "Point2D",
    "RegressionModel",
    "BandRow",
    "pearson_r",
    "ols",
    "line_and_band",
    # Density
    "DensityPoint",
    "Quartiles",
    "kernel_density",
    "calculate_quartiles",
    # Classification
    "BreakResult",
    "BreakSet",
    "EmptyBreakSet",
    "NoData",
    "calculate_breaks",
    "classify_value",
    "extract_metric_values",
    "legend_ranges",
    # Comparison
    "find_most_divergent_pair",
    "subgroup_means",
    # Formatting
    "format_correlation",
    "format_metric_value",
    "format_range",
    # Output
    "band_frame",
    "breaks_frame",
    "density_frame",
    "save_tables_to_csv",
]
