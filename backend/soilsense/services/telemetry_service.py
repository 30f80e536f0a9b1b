"""Telemetry service layer — composes window resolution, store reads and bucketing."""

import logging
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from soilsense.aggregation import (
    Window,
    anchor_hour,
    bucketize,
    custom_window,
    evaluate,
    resolve,
    rotate,
    to_wall_clock,
)
from soilsense.config import LOCAL_TIMEZONE, STRICT_RANGE_TOKENS
from soilsense.models import Device, SensorReading
from soilsense.schemas import (
    DeviceOverview,
    DeviceStatus,
    HourlyAverageResponse,
    HourlyPoint,
    ReadingCreate,
    ReadingOut,
    ReadingsResponse,
)
from soilsense.services._registry import resolve_field
from soilsense.services.reading_store import ReadingStore

__all__ = [
    "NO_DATA",
    "resolve_window",
    "raw_range",
    "hourly_average",
    "latest",
    "status",
    "device_status",
    "device_overview",
    "ingest",
]

logger = logging.getLogger(__name__)

NO_DATA = "no data"
MEAN_PRECISION = 2


def local_timezone() -> tzinfo | None:
    """Configured wall-clock zone, or None for the server's local zone."""
    return ZoneInfo(LOCAL_TIMEZONE) if LOCAL_TIMEZONE else None


def resolve_window(
    range_token: str | None,
    now: datetime,
    start: datetime | None = None,
    end: datetime | None = None,
) -> Window:
    """
    Resolve request parameters into a wall-clock window.

    Without a token, explicit bounds mean "custom" and no bounds mean "day".
    """
    tz = local_timezone()
    start = to_wall_clock(start, tz) if start is not None else None
    end = to_wall_clock(end, tz) if end is not None else None

    if range_token is None:
        range_token = "custom" if start is not None or end is not None else "day"

    custom = None
    if range_token.strip().lower() == "custom":
        custom = custom_window(start, end)

    return resolve(range_token, now, custom, strict=STRICT_RANGE_TOKENS, tz=tz)


def _format_mean(mean: float | None) -> float | str:
    # Rounding happens here only; buckets keep the full-precision sum
    if mean is None:
        return NO_DATA
    return round(mean, MEAN_PRECISION)


async def raw_range(store: ReadingStore, device_id: str, window: Window) -> ReadingsResponse:
    """Readings for a device inside the window, oldest first."""
    await store.get_device(device_id)
    readings = await store.query(device_id, window)
    logger.info(
        f"Raw range for {device_id} [{window.start.isoformat()}, {window.end.isoformat()}): "
        f"{len(readings)} readings"
    )
    return ReadingsResponse(
        device_id=device_id,
        start=window.start,
        end=window.end,
        count=len(readings),
        readings=[ReadingOut.model_validate(reading) for reading in readings],
    )


async def hourly_average(
    store: ReadingStore,
    device_id: str,
    window: Window,
    field: str,
    now: datetime,
    rotated: bool = True,
) -> HourlyAverageResponse:
    """
    Hour-of-day averages of one field over the window.

    With ``rotated`` the 24 points are labelled as a rolling window whose
    first label is the hour after ``now``; otherwise labels run 0 -> 23.
    """
    config = resolve_field(field)
    await store.get_device(device_id)
    readings = await store.query(device_id, window)

    buckets = bucketize(readings, config.attribute)
    anchor = anchor_hour(to_wall_clock(now, local_timezone())) if rotated else 0

    points = [
        HourlyPoint(
            time_range=item.hour_label,
            value=_format_mean(item.bucket.mean),
            count=item.bucket.count,
        )
        for item in rotate(buckets, anchor)
    ]

    logger.info(
        f"Hourly {config.wire_name} for {device_id}: {len(readings)} readings, "
        f"{sum(1 for b in buckets if b.has_data)}/24 hours with data, anchor={anchor}"
    )
    return HourlyAverageResponse(
        device_id=device_id,
        field=config.wire_name,
        unit=config.unit,
        start=window.start,
        end=window.end,
        anchor_hour=anchor,
        points=points,
    )


async def latest(store: ReadingStore, device_id: str) -> ReadingOut | None:
    """Most recent reading for a known device, or None if it has never reported."""
    await store.get_device(device_id)
    reading = await store.latest(device_id)
    if reading is None:
        return None
    return ReadingOut.model_validate(reading)


def status(
    device: Device,
    latest_reading: SensorReading | ReadingOut | None,
    now: datetime,
) -> DeviceStatus:
    """Derive liveness from the device's check interval and its latest reading."""
    last_reading_at = latest_reading.timestamp if latest_reading is not None else None
    liveness = evaluate(
        device.check_interval_minutes,
        last_reading_at,
        to_wall_clock(now, local_timezone()),
    )
    return DeviceStatus(
        device_id=device.id,
        is_online=liveness == "On",
        status=liveness,
        last_reading_at=last_reading_at,
        check_interval_minutes=device.check_interval_minutes,
    )


async def device_status(store: ReadingStore, device_id: str, now: datetime) -> DeviceStatus:
    device = await store.get_device(device_id)
    return status(device, await store.latest(device_id), now)


async def device_overview(store: ReadingStore, now: datetime) -> list[DeviceOverview]:
    """All devices with their latest reading and status, for the dashboard."""
    devices = await store.list_devices()
    latest_by_device = await store.latest_batch([device.id for device in devices])

    overview: list[DeviceOverview] = []
    for device in devices:
        reading = latest_by_device.get(device.id)
        overview.append(
            DeviceOverview(
                id=device.id,
                label=device.label,
                location=device.location,
                check_interval_minutes=device.check_interval_minutes,
                latest_reading=ReadingOut.model_validate(reading) if reading else None,
                status=status(device, reading, now),
            )
        )
    return overview


async def ingest(store: ReadingStore, payload: ReadingCreate, now: datetime) -> ReadingOut:
    """Store one reading for a registered device."""
    await store.get_device(payload.device_id)

    timestamp = payload.timestamp if payload.timestamp is not None else now
    reading = await store.add(
        SensorReading(
            device_id=payload.device_id,
            timestamp=to_wall_clock(timestamp, local_timezone()),
            soil_moisture=payload.soil_moisture,
            humidity=payload.humidity,
            temperature=payload.temperature,
        )
    )
    logger.info(f"Stored reading {reading.id} for {payload.device_id} at {reading.timestamp}")
    return ReadingOut.model_validate(reading)
