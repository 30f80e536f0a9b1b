#!/usr/bin/env python3
"""Seed demo field devices into the database."""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import select

from soilsense.database import async_session
from soilsense.models import Device

DEVICES = [
    {
        "id": "field-north",
        "label": "North Field Probe",
        "location": "North field, row 4",
        "check_interval_minutes": 15,
    },
    {
        "id": "greenhouse-1",
        "label": "Greenhouse Bench",
        "location": "Greenhouse 1",
        "check_interval_minutes": 5,
    },
    {
        # Stops reporting partway through generated data, so it shows as Off
        "id": "orchard-east",
        "label": "Orchard Probe",
        "location": "East orchard",
        "check_interval_minutes": 30,
    },
]


async def seed_devices() -> None:
    """Seed devices (idempotent)."""
    async with async_session() as session:
        result = await session.execute(select(Device).limit(1))
        if result.scalar_one_or_none():
            print("Devices already seeded, skipping.")
            return

        for device_data in DEVICES:
            session.add(Device(**device_data))
        await session.commit()
        print(f"Seeded {len(DEVICES)} devices.")


if __name__ == "__main__":
    asyncio.run(seed_devices())
