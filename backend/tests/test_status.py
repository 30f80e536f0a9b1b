"""Tests for device liveness evaluation."""

from datetime import datetime, timedelta

from soilsense.aggregation import evaluate

NOW = datetime(2026, 5, 14, 14, 30)


def test_reading_within_interval_is_on():
    assert evaluate(5, NOW - timedelta(minutes=4), NOW) == "On"


def test_reading_older_than_interval_is_off():
    assert evaluate(5, NOW - timedelta(minutes=6), NOW) == "Off"


def test_reading_exactly_one_interval_old_is_on():
    assert evaluate(5, NOW - timedelta(minutes=5), NOW) == "On"


def test_no_reading_is_off():
    assert evaluate(5, None, NOW) == "Off"
