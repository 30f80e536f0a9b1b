"""Pydantic schemas for API request/response models."""

from soilsense.schemas.devices import DeviceOverview, DeviceStatus
from soilsense.schemas.readings import (
    HourlyAverageResponse,
    HourlyPoint,
    LatestReadingRequest,
    ReadingCreate,
    ReadingOut,
    ReadingsResponse,
)

__all__ = [
    # Device schemas
    "DeviceOverview",
    "DeviceStatus",
    # Reading schemas
    "HourlyAverageResponse",
    "HourlyPoint",
    "LatestReadingRequest",
    "ReadingCreate",
    "ReadingOut",
    "ReadingsResponse",
]
