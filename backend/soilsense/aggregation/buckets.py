"""Bucketing engine — folds readings into 24 hour-of-day buckets.

Readings that share an hour-of-day are merged regardless of calendar day,
so a multi-day window yields a "typical day" profile rather than a
chronological series.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any, Literal, get_args

from soilsense.aggregation.windows import to_wall_clock
from soilsense.errors import InvalidRange

HOURS_PER_DAY = 24

NumericField = Literal["soil_moisture", "humidity", "temperature"]
NUMERIC_FIELDS: tuple[str, ...] = get_args(NumericField)


@dataclass
class Bucket:
    """Running count and sum for one hour-of-day slot."""

    hour_index: int
    count: int = 0
    sum: float = 0.0

    def add(self, value: float) -> None:
        self.count += 1
        self.sum += value

    @property
    def has_data(self) -> bool:
        return self.count > 0

    @property
    def mean(self) -> float | None:
        """Unrounded mean, or None when the bucket is empty."""
        if self.count == 0:
            return None
        return self.sum / self.count


def hour_of_day(timestamp: datetime, tz: tzinfo | None = None) -> int:
    return to_wall_clock(timestamp, tz).hour


def _numeric_value(reading: Any, field: str) -> float | None:
    value = getattr(reading, field, None)
    if value is None or isinstance(value, bool):
        return None
    value = float(value)
    if math.isnan(value):
        return None
    return value


def bucketize(
    readings: Iterable[Any],
    field: str,
    tz: tzinfo | None = None,
) -> list[Bucket]:
    """
    Accumulate ``field`` of each reading into its hour-of-day bucket.

    Always returns 24 buckets ordered hour 0 -> 23. Readings whose field is
    missing or NaN are left out of both count and sum.
    """
    if field not in NUMERIC_FIELDS:
        raise InvalidRange(f"Unknown numeric field: {field!r}")

    buckets = [Bucket(hour_index=hour) for hour in range(HOURS_PER_DAY)]
    for reading in readings:
        value = _numeric_value(reading, field)
        if value is None:
            continue
        buckets[hour_of_day(reading.timestamp, tz)].add(value)

    return buckets
