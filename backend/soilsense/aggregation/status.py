"""Status evaluator — on/off liveness from the most recent reading."""

from datetime import datetime, timedelta
from typing import Literal

Liveness = Literal["On", "Off"]


def evaluate(
    check_interval_minutes: int,
    last_reading_at: datetime | None,
    now: datetime,
) -> Liveness:
    """A device is On while its last reading is no older than one check interval."""
    if last_reading_at is None:
        return "Off"
    if last_reading_at + timedelta(minutes=check_interval_minutes) < now:
        return "Off"
    return "On"
