"""Sensor reading model."""

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from soilsense.database import Base


class SensorReading(Base):
    """One telemetry sample. Timestamps are naive wall-clock local time."""

    __tablename__ = "sensor_readings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    device_id: Mapped[str] = mapped_column(String(50), ForeignKey("devices.id"), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    # Nullable so partial payloads can still be stored
    soil_moisture: Mapped[float | None] = mapped_column(Float, nullable=True)
    humidity: Mapped[float | None] = mapped_column(Float, nullable=True)
    temperature: Mapped[float | None] = mapped_column(Float, nullable=True)

    device: Mapped["Device"] = relationship(back_populates="readings")

    __table_args__ = (Index("ix_sensor_readings_device_time", "device_id", "timestamp"),)


# Import here to avoid circular imports
from soilsense.models.device import Device  # noqa: E402, F401
