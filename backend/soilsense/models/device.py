"""Device model."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from soilsense.config import DEFAULT_CHECK_INTERVAL_MINUTES
from soilsense.database import Base


class Device(Base):
    """Field device reporting soil and climate telemetry."""

    __tablename__ = "devices"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    label: Mapped[str] = mapped_column(String(100), nullable=False)
    location: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # Expected reporting period; a device silent for longer is considered offline
    check_interval_minutes: Mapped[int] = mapped_column(
        Integer, nullable=False, default=DEFAULT_CHECK_INTERVAL_MINUTES
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, server_default=func.now())

    readings: Mapped[list["SensorReading"]] = relationship(back_populates="device")


# Import here to avoid circular imports
from soilsense.models.readings import SensorReading  # noqa: E402, F401
