"""Reading ingestion routes."""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException

from soilsense.routes._deps import get_now, get_store
from soilsense.schemas import LatestReadingRequest, ReadingCreate, ReadingOut
from soilsense.services import ReadingStore, ingest, latest

router = APIRouter(prefix="/api/readings", tags=["readings"])


@router.post("", response_model=ReadingOut, status_code=201)
async def create_reading(
    payload: ReadingCreate,
    store: ReadingStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> ReadingOut:
    """Store a reading posted by a field device."""
    return await ingest(store, payload, now)


@router.post("/latest", response_model=ReadingOut)
async def latest_reading(
    payload: LatestReadingRequest,
    store: ReadingStore = Depends(get_store),
) -> ReadingOut:
    """Latest reading lookup with the device id in the request body."""
    reading = await latest(store, payload.device_id)
    if reading is None:
        raise HTTPException(status_code=404, detail="No readings found for this device")
    return reading
