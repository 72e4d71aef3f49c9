"""Define standardized column names for exported result tables."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TableColumns:
    """Container for standardized column labels.

    These labels are used by every DataFrame built in ``chartstats.output`` so
    exported CSVs line up with chart field names.

    Attributes:
        x: Grid position on the horizontal axis, in the units of the input
            observations.
        y: Fitted mean response at ``x``.
        lower, upper: Confidence band limits around ``y``. Equal to ``y``
            where the band is undefined.
        density: Estimated probability density at ``x`` (per unit of x).
        class_index: Zero-based choropleth fill class.
        range_from, range_to: Lower and upper value of a legend class.
        label: Formatted legend text.
    """

    x: str = "x"
    y: str = "y"
    lower: str = "lower"
    upper: str = "upper"
    density: str = "density"
    class_index: str = "class"
    range_from: str = "from"
    range_to: str = "to"
    label: str = "label"


COLUMNS = TableColumns()
