"""Pure time-bucketing core: windows, hour-of-day buckets, rotation, liveness."""

from soilsense.aggregation.buckets import (
    HOURS_PER_DAY,
    NUMERIC_FIELDS,
    Bucket,
    bucketize,
    hour_of_day,
)
from soilsense.aggregation.rotation import RotatedBucket, anchor_hour, rotate
from soilsense.aggregation.status import Liveness, evaluate
from soilsense.aggregation.windows import (
    RANGE_TOKENS,
    RangeToken,
    Window,
    custom_window,
    resolve,
    start_of_day,
    to_wall_clock,
)

__all__ = [
    "HOURS_PER_DAY",
    "NUMERIC_FIELDS",
    "Bucket",
    "bucketize",
    "hour_of_day",
    "RotatedBucket",
    "anchor_hour",
    "rotate",
    "Liveness",
    "evaluate",
    "RANGE_TOKENS",
    "RangeToken",
    "Window",
    "custom_window",
    "resolve",
    "start_of_day",
    "to_wall_clock",
]
