"""Tests for rolling-window relabelling of hour buckets."""

from datetime import datetime

import pytest

from soilsense.aggregation import Bucket, anchor_hour, rotate


def _buckets() -> list[Bucket]:
    return [Bucket(hour_index=h, count=h, sum=float(h * 10)) for h in range(24)]


def test_anchor_is_the_hour_after_now():
    assert anchor_hour(datetime(2026, 5, 14, 14, 30)) == 15


def test_anchor_wraps_at_midnight():
    assert anchor_hour(datetime(2026, 5, 14, 23, 59)) == 0


def test_scenario_now_at_fourteen():
    rotated = rotate(_buckets(), anchor_hour(datetime(2026, 5, 14, 14, 0)))

    assert rotated[0].hour_label == 15
    assert rotated[9].hour_label == 0
    assert rotated[23].hour_label == 14


def test_anchor_zero_is_identity():
    rotated = rotate(_buckets(), 0)
    assert [item.hour_label for item in rotated] == list(range(24))


def test_rotation_is_a_bijection():
    rotated = rotate(_buckets(), 7)
    assert sorted(item.hour_label for item in rotated) == list(range(24))


@pytest.mark.parametrize("first,second", [(3, 5), (20, 9), (23, 23), (0, 17)])
def test_two_rotations_compose(first, second):
    twice = rotate(rotate(_buckets(), first), second)
    once = rotate(_buckets(), (first + second) % 24)
    assert [item.hour_label for item in twice] == [item.hour_label for item in once]


def test_statistics_are_untouched():
    buckets = _buckets()
    rotated = rotate(buckets, 15)

    assert [item.bucket for item in rotated] == buckets
    assert rotated[4].bucket.hour_index == 4
    assert rotated[4].bucket.count == 4


def test_requires_24_buckets():
    with pytest.raises(ValueError):
        rotate(_buckets()[:23], 1)
