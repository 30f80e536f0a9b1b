"""Reading store client — device registry and reading log over SQLAlchemy."""

import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from sqlalchemy import and_, func, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from soilsense.aggregation import Window
from soilsense.errors import DeviceNotFound, StoreUnavailable
from soilsense.models import Device, SensorReading

__all__ = ["ReadingStore"]

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def _translate_errors(method: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
    """Surface connection-level database failures as StoreUnavailable."""

    @wraps(method)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return await method(*args, **kwargs)
        except OperationalError as exc:
            logger.error(f"Reading store unavailable in {method.__name__}: {exc}")
            raise StoreUnavailable("Reading store is unavailable") from exc

    return wrapper


class ReadingStore:
    """Append-only reading log keyed by device and timestamp."""

    def __init__(self, session: AsyncSession):
        self.session = session

    @_translate_errors
    async def get_device(self, device_id: str) -> Device:
        result = await self.session.execute(select(Device).where(Device.id == device_id))
        device = result.scalar_one_or_none()
        if device is None:
            raise DeviceNotFound(device_id)
        return device

    @_translate_errors
    async def list_devices(self) -> list[Device]:
        result = await self.session.execute(select(Device).order_by(Device.id))
        return list(result.scalars())

    @_translate_errors
    async def query(self, device_id: str, window: Window) -> list[SensorReading]:
        """Readings with ``window.start <= timestamp < window.end``, oldest first."""
        if window.is_empty:
            return []

        result = await self.session.execute(
            select(SensorReading)
            .where(
                and_(
                    SensorReading.device_id == device_id,
                    SensorReading.timestamp >= window.start,
                    SensorReading.timestamp < window.end,
                )
            )
            .order_by(SensorReading.timestamp, SensorReading.id)
        )
        return list(result.scalars())

    @_translate_errors
    async def latest(self, device_id: str) -> SensorReading | None:
        result = await self.session.execute(
            select(SensorReading)
            .where(SensorReading.device_id == device_id)
            .order_by(SensorReading.timestamp.desc(), SensorReading.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    @_translate_errors
    async def latest_batch(self, device_ids: list[str]) -> dict[str, SensorReading]:
        """Latest reading per device in a single query."""
        if not device_ids:
            return {}

        # Window function ranks each device's readings newest first
        ranked = (
            select(
                SensorReading.id,
                func.row_number()
                .over(
                    partition_by=SensorReading.device_id,
                    order_by=(SensorReading.timestamp.desc(), SensorReading.id.desc()),
                )
                .label("rn"),
            )
            .where(SensorReading.device_id.in_(device_ids))
            .subquery()
        )

        result = await self.session.execute(
            select(SensorReading)
            .join(ranked, SensorReading.id == ranked.c.id)
            .where(ranked.c.rn == 1)
        )
        return {reading.device_id: reading for reading in result.scalars()}

    @_translate_errors
    async def add(self, reading: SensorReading) -> SensorReading:
        self.session.add(reading)
        await self.session.commit()
        await self.session.refresh(reading)
        return reading
