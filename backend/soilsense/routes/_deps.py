"""Shared FastAPI dependencies."""

from datetime import UTC, datetime

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from soilsense.database import get_db
from soilsense.services import ReadingStore


def get_now() -> datetime:
    """Evaluation instant for a request, as an aware UTC datetime.

    The service layer converts it to wall-clock time in the configured zone.
    Overridden in tests for determinism.
    """
    return datetime.now(UTC)


async def get_store(session: AsyncSession = Depends(get_db)) -> ReadingStore:
    return ReadingStore(session)
