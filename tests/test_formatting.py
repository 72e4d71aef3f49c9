import math

from chartstats.formatting import format_correlation, format_metric_value, format_range


def test_percent_format():
    assert format_metric_value(12.345, "percent") == "12.3%"
    assert format_metric_value(0, "percent") == "0.0%"


def test_currency_format():
    assert format_metric_value(1234.5, "currency") == "$1,235"
    assert format_metric_value(-1234.5, "currency") == "-$1,235"
    assert format_metric_value(62000.2, "currency") == "$62,000"


def test_number_format():
    assert format_metric_value(1234567.4, "number") == "1,234,567"
    assert format_metric_value(2.5, "number") == "3"


def test_missing_values():
    assert format_metric_value(None, "percent") == "No data"
    assert format_metric_value(math.nan, "number") == "No data"


def test_unknown_format_falls_back_to_str():
    assert format_metric_value(1.5, "raw") == "1.5"


def test_range_and_correlation():
    assert format_range(10, 18, "number") == "10 - 18"
    assert format_correlation(0.7234) == "r = 0.72"
    assert format_correlation(math.nan) == "r = n/a"


def test_negative_halves_round_away_from_zero():
    assert format_metric_value(-2.5, "number") == "-3"
    assert format_metric_value(-2.4, "number") == "-2"
