#!/usr/bin/env python3
"""Generate several days of field telemetry with a diurnal cycle."""

import asyncio
import math
import random
import sys
from datetime import datetime, timedelta
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import select

from soilsense.database import async_session
from soilsense.models import Device, SensorReading

# Fixed seed for reproducibility
RANDOM_SEED = 42

# Time configuration
DAYS_TO_GENERATE = 14
INTERVAL_MINUTES = 15

# (soil moisture %, humidity %, temperature °C) daily means
BASELINES = {
    "field-north": (38.0, 62.0, 17.0),
    "greenhouse-1": (55.0, 78.0, 24.0),
    "orchard-east": (31.0, 58.0, 15.5),
}

# Devices that went silent this many hours before now
SILENT_DEVICES = {"orchard-east": 6}

# Soil dries out between waterings, then jumps back up
DRYING_PER_HOUR = 0.15
WATERING_EVERY_HOURS = 72


def generate_device_readings(
    device_id: str,
    start_time: datetime,
    end_time: datetime,
) -> list[SensorReading]:
    """Generate readings with a sinusoidal day/night cycle peaking mid-afternoon."""
    readings = []
    base_soil, base_humidity, base_temp = BASELINES[device_id]
    silent_from = end_time - timedelta(hours=SILENT_DEVICES.get(device_id, 0))
    current_time = start_time

    while current_time <= end_time:
        if device_id in SILENT_DEVICES and current_time > silent_from:
            break

        hours_elapsed = (current_time - start_time).total_seconds() / 3600
        hour = current_time.hour + current_time.minute / 60
        # Peak at 15:00, trough at 03:00
        cycle = math.sin((hour - 9) / 24 * 2 * math.pi)

        temperature = base_temp + 6.0 * cycle + random.uniform(-0.4, 0.4)
        humidity = base_humidity - 12.0 * cycle + random.uniform(-2, 2)
        soil = base_soil - DRYING_PER_HOUR * (hours_elapsed % WATERING_EVERY_HOURS)
        soil += random.uniform(-0.5, 0.5)

        readings.append(
            SensorReading(
                device_id=device_id,
                timestamp=current_time,
                soil_moisture=round(max(soil, 0.0), 1),
                humidity=round(min(max(humidity, 0.0), 100.0), 1),
                temperature=round(temperature, 1),
            )
        )
        current_time += timedelta(minutes=INTERVAL_MINUTES)

    return readings


async def generate_all_data() -> None:
    """Generate readings for every seeded device."""
    random.seed(RANDOM_SEED)

    end_time = datetime.now().replace(second=0, microsecond=0)
    start_time = end_time - timedelta(days=DAYS_TO_GENERATE)

    print(f"Generating data from {start_time} to {end_time}")

    async with async_session() as session:
        result = await session.execute(select(SensorReading).limit(1))
        if result.scalar_one_or_none():
            print("Data already exists. Run with --reset to regenerate.")
            return

        result = await session.execute(select(Device))
        devices = result.scalars().all()

        total_readings = 0
        for device in devices:
            if device.id not in BASELINES:
                continue
            readings = generate_device_readings(device.id, start_time, end_time)
            session.add_all(readings)
            total_readings += len(readings)

        await session.commit()
        print(f"Generated {total_readings} readings for {len(devices)} devices.")


async def clear_readings() -> None:
    """Clear all reading data."""
    async with async_session() as session:
        await session.execute(SensorReading.__table__.delete())
        await session.commit()
    print("Cleared all readings.")


async def reset_and_generate() -> None:
    """Clear existing data and regenerate."""
    await clear_readings()
    await generate_all_data()


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "--reset":
        asyncio.run(reset_and_generate())
    else:
        asyncio.run(generate_all_data())
