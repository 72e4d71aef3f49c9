"""Convert numeric results into tables and write them to reproducible CSV files.

This module is the boundary between in-memory results and tabular artifacts
handed to rendering code or archived next to a chart.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Iterable, Mapping

import pandas as pd

from .classification import BreakResult, legend_ranges
from .formatting import format_range
from .schema import COLUMNS
from .stats.density import DensityPoint
from .stats.regression import BandRow

logger = logging.getLogger(__name__)


def band_frame(band: Iterable[BandRow]) -> pd.DataFrame:
    """Build a table of the sampled regression line and its band.

    Args:
        band (Iterable[BandRow]): Output of ``line_and_band``.

    Returns:
        pandas.DataFrame: Columns ``x``, ``y``, ``lower`` and ``upper``.
    """
    rows = [(r.x, r.y, r.lower, r.upper) for r in band]
    return pd.DataFrame(
        rows, columns=[COLUMNS.x, COLUMNS.y, COLUMNS.lower, COLUMNS.upper]
    )


def density_frame(points: Iterable[DensityPoint]) -> pd.DataFrame:
    rows = [(p.x, p.density) for p in points]
    return pd.DataFrame(rows, columns=[COLUMNS.x, COLUMNS.density])


def breaks_frame(result: BreakResult, fmt: str = "number") -> pd.DataFrame:
    """Build the legend table for a break result.

    Args:
        result (BreakResult): Output of ``calculate_breaks``.
        fmt (str): Value format passed to ``format_metric_value``.

    Returns:
        pandas.DataFrame: One row per class with ``class``, ``from``, ``to``
        and ``label``. Empty for ``NoData``; a single row for
        ``EmptyBreakSet``.
    """
    cols = [COLUMNS.class_index, COLUMNS.range_from, COLUMNS.range_to, COLUMNS.label]
    rows = [
        (i, lo, hi, format_range(lo, hi, fmt))
        for i, (lo, hi) in enumerate(legend_ranges(result))
    ]
    return pd.DataFrame(rows, columns=cols)


def save_tables_to_csv(
    tables: Mapping[str, pd.DataFrame], output_dir: str = "output"
) -> Dict[str, str]:
    """Write each table to ``<output_dir>/<name>.csv``.

    Args:
        tables: Mapping of file stem to DataFrame.
        output_dir (str): Directory for CSV outputs; created if missing.

    Returns:
        dict[str, str]: Mapping of file stem to written path.
    """
    os.makedirs(output_dir, exist_ok=True)

    paths = {}
    for name, frame in tables.items():
        path = os.path.join(output_dir, f"{name}.csv")
        frame.to_csv(path, index=False)
        logger.info("Saved %s (%d rows) to %s", name, len(frame), path)
        paths[name] = path
    return paths
