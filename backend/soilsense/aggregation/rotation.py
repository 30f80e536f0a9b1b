"""Rotation normalizer — relabels hour buckets as a rolling window ending near now."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from soilsense.aggregation.buckets import HOURS_PER_DAY, Bucket


@dataclass(frozen=True)
class RotatedBucket:
    """A bucket paired with the hour label it is presented under."""

    hour_label: int
    bucket: Bucket


def anchor_hour(now: datetime) -> int:
    """The hour following the current one, which labels the first emitted bucket."""
    return (now.hour + 1) % HOURS_PER_DAY


def rotate(
    buckets: Sequence[Bucket | RotatedBucket],
    anchor: int,
) -> list[RotatedBucket]:
    """
    Relabel each bucket as ``(label + anchor) mod 24``.

    A plain Bucket's label is its position in the sequence; an already
    rotated bucket keeps accumulating onto its existing label, so rotating
    by ``a`` then ``b`` equals a single rotation by ``a + b``. Only labels
    change; the bucket statistics are passed through untouched.
    """
    if len(buckets) != HOURS_PER_DAY:
        raise ValueError(f"Expected {HOURS_PER_DAY} buckets, got {len(buckets)}")

    rotated: list[RotatedBucket] = []
    for position, item in enumerate(buckets):
        if isinstance(item, RotatedBucket):
            label, bucket = item.hour_label, item.bucket
        else:
            label, bucket = position, item
        rotated.append(RotatedBucket(hour_label=(label + anchor) % HOURS_PER_DAY, bucket=bucket))
    return rotated
