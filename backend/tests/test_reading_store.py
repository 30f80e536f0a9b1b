"""Tests for the reading store client and its error translation."""

from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from soilsense.aggregation import Window
from soilsense.database import async_session
from soilsense.errors import DeviceNotFound, StoreUnavailable
from soilsense.main import app
from soilsense.routes._deps import get_store
from soilsense.services import ReadingStore


class _BrokenSession:
    """Session stand-in whose every query fails at the driver level."""

    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("unable to open database file"))


@pytest.mark.asyncio
async def test_query_is_half_open_and_ordered(database):
    async with async_session() as session:
        store = ReadingStore(session)
        window = Window(start=datetime(2026, 5, 13, 15, 0), end=datetime(2026, 5, 14, 14, 26))
        readings = await store.query("plot-a", window)

    assert [r.timestamp for r in readings] == [
        datetime(2026, 5, 13, 15, 0),
        datetime(2026, 5, 14, 10, 0),
        datetime(2026, 5, 14, 10, 30),
    ]


@pytest.mark.asyncio
async def test_query_empty_window(database):
    moment = datetime(2026, 5, 14, 10, 0)
    async with async_session() as session:
        readings = await ReadingStore(session).query("plot-a", Window(start=moment, end=moment))
    assert readings == []


@pytest.mark.asyncio
async def test_latest_batch(database):
    async with async_session() as session:
        latest = await ReadingStore(session).latest_batch(["plot-a", "plot-b", "plot-c"])

    assert set(latest) == {"plot-a", "plot-b"}
    assert latest["plot-a"].timestamp == datetime(2026, 5, 14, 14, 26)
    assert latest["plot-b"].timestamp == datetime(2026, 5, 14, 14, 0)


@pytest.mark.asyncio
async def test_get_device_not_found(database):
    async with async_session() as session:
        with pytest.raises(DeviceNotFound) as exc_info:
            await ReadingStore(session).get_device("ghost")
    assert exc_info.value.device_id == "ghost"


@pytest.mark.asyncio
async def test_operational_error_becomes_store_unavailable():
    store = ReadingStore(_BrokenSession())
    with pytest.raises(StoreUnavailable):
        await store.latest("plot-a")


@pytest.mark.asyncio
async def test_store_unavailable_maps_to_503():
    app.dependency_overrides[get_store] = lambda: ReadingStore(_BrokenSession())
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as client:
            response = await client.get("/api/devices/plot-a/readings")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 503
