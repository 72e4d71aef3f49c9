#!/usr/bin/env python3
"""
Main script for generating reference chart tables from a demo dataset.
"""

# Pipeline overview:
# 1) Draw a fixed-seed synthetic dataset (paired x/y, a skewed sample, a
#    per-region metric and a category x subgroup table).
# 2) Fit the regression line and band and compute Pearson r.
# 3) Estimate the density curve and quartiles of the sample.
# 4) Compute choropleth breaks and pick the most divergent subgroup pair.
# 5) Export every table to CSV under output/.

import logging
import os
import sys
import time

import numpy as np

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("chartstats.log", mode="w"),
    ],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from chartstats import (
    EmptyBreakSet,
    NoData,
    band_frame,
    breaks_frame,
    calculate_breaks,
    calculate_quartiles,
    density_frame,
    extract_metric_values,
    find_most_divergent_pair,
    format_correlation,
    kernel_density,
    line_and_band,
    pearson_r,
    save_tables_to_csv,
)

SEED = 20240501


def build_demo_data(seed=SEED):
    """Return a reproducible dataset covering every chart input shape."""
    rng = np.random.default_rng(seed)

    x = rng.uniform(0.4, 0.95, size=60)
    y = 2.0 + 6.0 * x + rng.normal(0.0, 0.4, size=60)
    points = list(zip(x.tolist(), y.tolist()))

    sample = rng.gamma(shape=2.0, scale=3.0, size=200).tolist()

    features = [
        {"properties": {"zip": f"{10000 + i}", "median_income": float(v)}}
        for i, v in enumerate(rng.normal(62000.0, 15000.0, size=80))
    ]
    features.append({"properties": {"zip": "99999", "median_income": None}})

    subgroups = ("18-29", "30-44", "45-64", "65+")
    groups = {
        category: {
            key: {"value": float(50.0 + 8.0 * j + rng.normal(0.0, 3.0))}
            for j, key in enumerate(subgroups)
        }
        for category in ("Economy", "Health care", "Immigration", "Climate")
    }
    return points, sample, features, groups


def main():
    """Main execution function with step timing."""

    start_time = time.time()
    logging.info("Initializing chart table pipeline")

    points, sample, features, groups = build_demo_data()
    logging.info(
        "Demo data: %d points, %d sample values, %d features, %d categories",
        len(points),
        len(sample),
        len(features),
        len(groups),
    )

    step_start = time.time()
    r = pearson_r(points)
    xs = [p[0] for p in points]
    line, band = line_and_band(points, min(xs), max(xs))
    logging.info(
        "Regression: %s, %d line points, %d band rows",
        format_correlation(r),
        len(line),
        len(band),
    )
    logging.info(
        "Regression completed in %.2f seconds", time.time() - step_start
    )

    step_start = time.time()
    density = kernel_density(sample)
    quartiles = calculate_quartiles(sample)
    logging.info(
        "Quartiles: q1=%.3f median=%.3f q3=%.3f (%d outliers)",
        quartiles.q1,
        quartiles.median,
        quartiles.q3,
        len(quartiles.outliers),
    )
    logging.info("Density completed in %.2f seconds", time.time() - step_start)

    values = extract_metric_values(features, "median_income")
    dropped = len(features) - len(values)
    if dropped:
        logging.warning("Dropped %d features without a numeric metric", dropped)
    breaks = calculate_breaks(values)
    if isinstance(breaks, NoData):
        logging.error("No metric values available for classification")
        return 1
    if isinstance(breaks, EmptyBreakSet):
        logging.warning("All metric values equal %.3f; using one class", breaks.min)
    else:
        logging.info("Breaks: %s", ", ".join(f"{b:.2f}" for b in breaks.breaks))

    pair = find_most_divergent_pair(groups)
    if pair is None:
        logging.warning("Fewer than two subgroups have data; no comparison pair")
    else:
        logging.info("Most divergent subgroups: %s vs %s", *pair)

    output_dir = "output"
    paths = save_tables_to_csv(
        {
            "regression_band": band_frame(band),
            "density": density_frame(density),
            "choropleth_breaks": breaks_frame(breaks, fmt="currency"),
        },
        output_dir,
    )

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    logging.info("Generated output files:")
    for name, path in paths.items():
        logging.info("  - %s: %s", name, path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
