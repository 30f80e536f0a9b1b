"""Shared fixtures: a throwaway SQLite database and a fixed request clock."""

import os
import tempfile
from datetime import datetime
from pathlib import Path

# Must be set before soilsense.config is imported
_TMP_DIR = Path(tempfile.mkdtemp(prefix="soilsense-tests-"))
os.environ["DATABASE_PATH"] = str(_TMP_DIR / "test.db")
os.environ["LOG_DIR"] = str(_TMP_DIR / "logs")
os.environ["STRICT_RANGE_TOKENS"] = "false"
os.environ["LOCAL_TIMEZONE"] = ""

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from soilsense.database import Base, async_session, engine  # noqa: E402
from soilsense.main import app  # noqa: E402
from soilsense.models import Device, SensorReading  # noqa: E402
from soilsense.routes._deps import get_now  # noqa: E402

FIXED_NOW = datetime(2026, 5, 14, 14, 30)

DEVICES = [
    {"id": "plot-a", "label": "Plot A", "location": "North field", "check_interval_minutes": 5},
    {"id": "plot-b", "label": "Plot B", "location": "South field", "check_interval_minutes": 10},
    {"id": "plot-c", "label": "Plot C", "location": None, "check_interval_minutes": 5},
]


def _readings() -> list[SensorReading]:
    return [
        # Inside the "day" window
        SensorReading(
            device_id="plot-a",
            timestamp=datetime(2026, 5, 14, 10, 0),
            soil_moisture=30.0,
            humidity=55.0,
            temperature=20.0,
        ),
        SensorReading(
            device_id="plot-a",
            timestamp=datetime(2026, 5, 14, 10, 30),
            soil_moisture=34.0,
            humidity=65.0,
            temperature=24.0,
        ),
        SensorReading(
            device_id="plot-a",
            timestamp=datetime(2026, 5, 13, 15, 0),
            soil_moisture=50.0,
            humidity=70.0,
            temperature=30.0,
        ),
        SensorReading(
            device_id="plot-a",
            timestamp=datetime(2026, 5, 14, 14, 26),
            soil_moisture=40.0,
            humidity=60.0,
            temperature=25.0,
        ),
        # Only inside week/month/year windows
        SensorReading(
            device_id="plot-a",
            timestamp=datetime(2026, 5, 10, 9, 0),
            soil_moisture=45.0,
            humidity=50.0,
            temperature=12.0,
        ),
        # Half an hour old with a 10 minute check interval
        SensorReading(
            device_id="plot-b",
            timestamp=datetime(2026, 5, 14, 14, 0),
            soil_moisture=22.0,
            humidity=48.0,
            temperature=19.5,
        ),
    ]


@pytest.fixture
async def database():
    """Recreate the schema and seed devices and readings."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        session.add_all([Device(**device_data) for device_data in DEVICES])
        await session.commit()
        session.add_all(_readings())
        await session.commit()

    yield


@pytest.fixture
async def client(database):
    """Create test client with the request clock pinned to FIXED_NOW."""
    app.dependency_overrides[get_now] = lambda: FIXED_NOW
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW
