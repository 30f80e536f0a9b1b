"""Pydantic schemas for readings and hourly aggregates."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

NoData = Literal["no data"]

# --- Ingestion ---


class ReadingCreate(BaseModel):
    """Telemetry payload posted by a field device."""

    model_config = ConfigDict(populate_by_name=True)

    device_id: str = Field(alias="deviceId", min_length=1, max_length=50)
    timestamp: datetime | None = None  # Server time when omitted
    soil_moisture: float | None = Field(default=None, alias="soilMoisture")
    humidity: float | None = None
    temperature: float | None = None


class LatestReadingRequest(BaseModel):
    """Body for the POST form of the latest-reading lookup."""

    model_config = ConfigDict(populate_by_name=True)

    device_id: str = Field(alias="deviceId", min_length=1)


# --- Readings ---


class ReadingOut(BaseModel):
    """A single stored reading."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    device_id: str = Field(serialization_alias="deviceId")
    timestamp: datetime
    soil_moisture: float | None = Field(default=None, serialization_alias="soilMoisture")
    humidity: float | None = None
    temperature: float | None = None


class ReadingsResponse(BaseModel):
    """Raw readings in a window, ascending by timestamp."""

    model_config = ConfigDict(populate_by_name=True)

    device_id: str = Field(serialization_alias="deviceId")
    start: datetime
    end: datetime
    count: int
    readings: list[ReadingOut]


# --- Hourly aggregates ---


class HourlyPoint(BaseModel):
    """One hour-of-day slot as presented to the dashboard."""

    model_config = ConfigDict(populate_by_name=True)

    time_range: int = Field(serialization_alias="timeRange", ge=0, le=23)
    value: float | NoData
    count: int


class HourlyAverageResponse(BaseModel):
    """24 hourly averages for one numeric field."""

    model_config = ConfigDict(populate_by_name=True)

    device_id: str = Field(serialization_alias="deviceId")
    field: str
    unit: str
    start: datetime
    end: datetime
    anchor_hour: int = Field(serialization_alias="anchorHour")
    points: list[HourlyPoint]
