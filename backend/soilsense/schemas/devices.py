"""Pydantic schemas for device status and the dashboard overview."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from soilsense.schemas.readings import ReadingOut


class DeviceStatus(BaseModel):
    """Derived liveness for a device."""

    model_config = ConfigDict(populate_by_name=True)

    device_id: str = Field(serialization_alias="deviceId")
    is_online: bool = Field(serialization_alias="isOnline")
    status: Literal["On", "Off"]
    last_reading_at: datetime | None = Field(serialization_alias="lastReadingAt")
    check_interval_minutes: int = Field(serialization_alias="checkIntervalMinutes")


class DeviceOverview(BaseModel):
    """Dashboard card: a device with its latest reading and status."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    label: str
    location: str | None = None
    check_interval_minutes: int = Field(serialization_alias="checkIntervalMinutes")
    latest_reading: ReadingOut | None = Field(serialization_alias="latestReading")
    status: DeviceStatus
