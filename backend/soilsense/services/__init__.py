"""Service layer modules."""

from soilsense.services.reading_store import ReadingStore
from soilsense.services.telemetry_service import (
    device_overview,
    device_status,
    hourly_average,
    ingest,
    latest,
    raw_range,
    resolve_window,
    status,
)

__all__ = [
    "ReadingStore",
    "device_overview",
    "device_status",
    "hourly_average",
    "ingest",
    "latest",
    "raw_range",
    "resolve_window",
    "status",
]
