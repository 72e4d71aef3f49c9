import math

import numpy as np
import pytest

from chartstats.classification import (
    UNIFORM_CLASS,
    BreakSet,
    EmptyBreakSet,
    NoData,
    calculate_breaks,
    classify_value,
    extract_metric_values,
    legend_ranges,
)


def test_equal_interval_breaks():
    result = calculate_breaks([10, 20, 30, 40, 50])
    assert isinstance(result, BreakSet)
    assert result.min == 10 and result.max == 50
    assert result.breaks == (18.0, 26.0, 34.0, 42.0)


def test_breaks_ignore_input_order():
    result = calculate_breaks([50, 10, 30])
    assert result == calculate_breaks([10, 30, 50])


def test_constant_values_give_empty_break_set():
    result = calculate_breaks([5, 5, 5])
    assert result == EmptyBreakSet(min=5.0, max=5.0)
    assert result.breaks == ()


def test_empty_values_give_no_data():
    assert isinstance(calculate_breaks([]), NoData)


def test_breaks_are_rounded_to_six_decimals():
    result = calculate_breaks([0.0, 1.0])
    assert result.breaks == (0.2, 0.4, 0.6, 0.8)
    result = calculate_breaks([0.0, 0.1])
    assert result.breaks == (0.02, 0.04, 0.06, 0.08)


def test_tiny_range_falls_back_to_unrounded_breaks():
    lo, hi = 1.0, 1.0 + 1e-8
    with pytest.warns(RuntimeWarning):
        result = calculate_breaks([lo, hi])
    step = (hi - lo) / 5
    assert result.breaks == tuple(lo + step * k for k in range(1, 5))
    assert all(lo < b < hi for b in result.breaks)


@pytest.mark.parametrize(
    "values",
    [
        [0.001, 0.002, 0.0035],
        [-100.0, 3.0, 250.5],
        [1e6, 1e6 + 3.0],
        [2.5, 2.5000001],
    ],
)
def test_break_count_invariant(values):
    result = calculate_breaks(values)
    assert isinstance(result, BreakSet)
    breaks = result.breaks
    assert len(breaks) == 4
    assert all(a < b for a, b in zip(breaks, breaks[1:]))
    assert all(result.min < b < result.max for b in breaks)


def test_extract_metric_values_filters_and_keeps_order():
    features = [
        {"properties": {"m": "3.5"}},
        {"properties": {"m": None}},
        {"properties": {"other": 1}},
        {"properties": {"m": 7}},
        {"properties": {"m": "n/a"}},
        {"properties": {"m": float("nan")}},
        {"properties": {"m": True}},
        {"properties": {"m": -2.25}},
        {},
    ]
    assert extract_metric_values(features, "m") == [3.5, 7.0, -2.25]
    assert extract_metric_values([], "m") == []


def test_classify_value_matches_step_rule():
    result = calculate_breaks([10, 50])
    assert classify_value(10, result) == 0
    assert classify_value(17.9, result) == 0
    assert classify_value(18, result) == 1
    assert classify_value(41.99, result) == 3
    assert classify_value(50, result) == 4
    assert classify_value(None, result) is None
    assert classify_value(math.nan, result) is None


def test_classify_value_degenerate_results():
    assert classify_value(5.0, EmptyBreakSet(min=5.0, max=5.0)) == UNIFORM_CLASS
    assert classify_value(5.0, NoData()) is None


def test_legend_ranges():
    result = calculate_breaks([10, 20, 30, 40, 50])
    assert legend_ranges(result) == [
        (10.0, 18.0),
        (18.0, 26.0),
        (26.0, 34.0),
        (34.0, 42.0),
        (42.0, 50.0),
    ]
    assert legend_ranges(EmptyBreakSet(min=3.0, max=3.0)) == [(3.0, 3.0)]
    assert legend_ranges(NoData()) == []


def test_classify_value_numpy_nan_is_missing():
    result = calculate_breaks([10, 50])
    assert classify_value(np.float32("nan"), result) is None
    assert classify_value(np.float64("nan"), result) is None
    assert classify_value(np.float32(30.0), result) == 2


def test_huge_values_with_tiny_range_still_give_four_breaks():
    # Step is below the float spacing at 1e16, so ascent cannot be strict.
    with pytest.warns(RuntimeWarning):
        result = calculate_breaks([1e16, 1e16 + 2])
    assert isinstance(result, BreakSet)
    assert len(result.breaks) == 4
    assert all(result.min <= b <= result.max for b in result.breaks)
    assert list(result.breaks) == sorted(result.breaks)


def test_repeat_calls_are_identical():
    values = [3.2, 7.7, 1.05, 9.999, 4.4]
    assert calculate_breaks(values) == calculate_breaks(values)
