"""Window resolver — maps range tokens to concrete [start, end) intervals."""

import calendar
import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, tzinfo
from typing import Literal, get_args

from soilsense.errors import InvalidRange

logger = logging.getLogger(__name__)

RangeToken = Literal["day", "week", "month", "year", "custom"]
RANGE_TOKENS: tuple[str, ...] = get_args(RangeToken)

FALLBACK_TOKEN = "month"


@dataclass(frozen=True)
class Window:
    """Half-open time interval. ``start == end`` is a valid, empty window."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidRange(
                f"Window start {self.start.isoformat()} is after end {self.end.isoformat()}"
            )

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end


def to_wall_clock(moment: datetime, tz: tzinfo | None = None) -> datetime:
    """Convert an aware datetime to naive wall-clock time in ``tz``.

    Naive datetimes are assumed to already be wall-clock time and are
    returned unchanged. ``tz=None`` means the server's local zone.
    """
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(tz).replace(tzinfo=None)


def start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _shift_months(moment: datetime, months: int) -> datetime:
    """Calendar month arithmetic, clamping the day to the target month's length."""
    month_index = moment.year * 12 + (moment.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def custom_window(start: datetime | None, end: datetime | None) -> Window:
    """Build a caller-supplied window, rejecting missing bounds."""
    if start is None or end is None:
        raise InvalidRange("Custom range requires both start and end")
    return Window(start=start, end=end)


def resolve(
    token: str,
    now: datetime,
    custom: Window | None = None,
    *,
    strict: bool = False,
    tz: tzinfo | None = None,
) -> Window:
    """
    Resolve a range token to a concrete window ending at ``now``.

    - "day": the 24 hours before now
    - "week": from midnight 7 days ago
    - "month": from midnight one calendar month ago
    - "year": from midnight one calendar year ago
    - "custom": the caller-supplied window

    Unknown tokens fall back to "month" unless ``strict`` is set, in which
    case they raise InvalidRange.

    An aware ``now`` is converted to wall-clock time in ``tz``. For "day" the
    24 hours are subtracted from the absolute instant first, so a window that
    spans a DST change still covers 24 real hours.
    """
    normalized = (token or "").strip().lower()

    if normalized == "custom":
        if custom is None:
            raise InvalidRange("Custom range requires both start and end")
        return custom

    if normalized not in RANGE_TOKENS:
        if strict:
            raise InvalidRange(f"Unknown range token: {token!r}")
        logger.warning(f"Unknown range token {token!r}, falling back to {FALLBACK_TOKEN!r}")
        normalized = FALLBACK_TOKEN

    wall_now = to_wall_clock(now, tz)

    if normalized == "day":
        if now.tzinfo is None:
            return Window(start=wall_now - timedelta(hours=24), end=wall_now)
        day_ago = now.astimezone(UTC) - timedelta(hours=24)
        return Window(start=to_wall_clock(day_ago, tz), end=wall_now)

    midnight = start_of_day(wall_now)
    if normalized == "week":
        start = midnight - timedelta(days=7)
    elif normalized == "month":
        start = _shift_months(midnight, -1)
    else:
        start = _shift_months(midnight, -12)

    return Window(start=start, end=wall_now)
