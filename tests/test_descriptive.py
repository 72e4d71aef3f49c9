import math

import pytest

from chartstats.stats.descriptive import (
    confidence_interval,
    create_histogram,
    mean,
    qq_plot_data,
    standard_deviation,
)


def test_mean_and_population_std():
    assert mean([2.0, 4.0, 6.0]) == pytest.approx(4.0)
    assert standard_deviation([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]) == pytest.approx(2.0)
    assert math.isnan(mean([]))
    assert math.isnan(standard_deviation([]))


def test_confidence_interval_z_scores():
    values = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
    ci = confidence_interval(values)
    assert ci["mean"] == pytest.approx(5.0)
    assert ci["error"] == pytest.approx(1.96 * 2.0 / math.sqrt(8))
    assert ci["lower"] < ci["mean"] < ci["upper"]

    ci99 = confidence_interval(values, confidence=0.99)
    assert ci99["error"] == pytest.approx(2.576 * 2.0 / math.sqrt(8))
    assert math.isnan(confidence_interval([])["mean"])


def test_histogram_sturges_bins():
    values = [0, 1, 2, 3, 4, 5, 6, 7]
    bins = create_histogram(values)
    assert len(bins) == 4
    assert sum(b.count for b in bins) == 8
    assert bins[-1].count == 2
    assert bins[0].label == "0.0-1.8"
    assert bins[0].mid == pytest.approx(0.875)


def test_histogram_edge_cases():
    assert create_histogram([]) == []
    bins = create_histogram([3.0, 3.0, 3.0], bins=2)
    assert [b.count for b in bins] == [3, 0]
    with pytest.raises(ValueError):
        create_histogram([1.0], bins=0)


def test_qq_plot_data_is_symmetric():
    points = qq_plot_data([3.0, 1.0, 2.0])
    assert [p.sample for p in points] == [1.0, 2.0, 3.0]
    assert points[1].theoretical == pytest.approx(0.0)
    assert points[0].theoretical == pytest.approx(-points[2].theoretical)
    assert qq_plot_data([]) == []
