"""Device API routes — dashboard overview, status, raw and hourly readings."""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from soilsense.routes._deps import get_now, get_store
from soilsense.schemas import (
    DeviceOverview,
    DeviceStatus,
    HourlyAverageResponse,
    ReadingOut,
    ReadingsResponse,
)
from soilsense.services import (
    ReadingStore,
    device_overview,
    device_status,
    hourly_average,
    latest,
    raw_range,
    resolve_window,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/devices", tags=["devices"])

RANGE_DESCRIPTION = "day, week, month, year or custom (requires start and end)"


@router.get("", response_model=list[DeviceOverview])
async def list_devices(
    store: ReadingStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> list[DeviceOverview]:
    """Get all devices with their latest reading and on/off status."""
    return await device_overview(store, now)


@router.get("/{device_id}/status", response_model=DeviceStatus)
async def get_status(
    device_id: str,
    store: ReadingStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> DeviceStatus:
    """Get the on/off status of a single device."""
    return await device_status(store, device_id, now)


@router.get("/{device_id}/readings", response_model=ReadingsResponse)
async def get_readings(
    device_id: str,
    range_token: str | None = Query(None, alias="range", description=RANGE_DESCRIPTION),
    start: datetime | None = Query(None, description="Start of custom range (ISO format)"),
    end: datetime | None = Query(None, description="End of custom range (ISO format)"),
    store: ReadingStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> ReadingsResponse:
    """Get raw readings for a device in a named or custom window."""
    window = resolve_window(range_token, now, start, end)
    return await raw_range(store, device_id, window)


@router.get("/{device_id}/readings/latest", response_model=ReadingOut)
async def get_latest_reading(
    device_id: str,
    store: ReadingStore = Depends(get_store),
) -> ReadingOut:
    """Get the most recent reading for a device."""
    reading = await latest(store, device_id)
    if reading is None:
        raise HTTPException(status_code=404, detail="No readings found for this device")
    return reading


@router.get("/{device_id}/hourly", response_model=HourlyAverageResponse)
async def get_hourly_averages(
    device_id: str,
    field: str = Query("soilMoisture", description="soilMoisture, humidity or temperature"),
    range_token: str | None = Query(None, alias="range", description=RANGE_DESCRIPTION),
    start: datetime | None = Query(None, description="Start of custom range (ISO format)"),
    end: datetime | None = Query(None, description="End of custom range (ISO format)"),
    rotate: bool = Query(True, description="Label hours as a rolling window ending now"),
    store: ReadingStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> HourlyAverageResponse:
    """Get 24 hour-of-day averages of one field."""
    window = resolve_window(range_token, now, start, end)
    return await hourly_average(store, device_id, window, field, now, rotated=rotate)
