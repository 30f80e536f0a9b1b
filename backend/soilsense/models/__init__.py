"""SQLAlchemy models."""

from soilsense.models.device import Device
from soilsense.models.readings import SensorReading

__all__ = [
    "Device",
    "SensorReading",
]
