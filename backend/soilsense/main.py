import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from soilsense.config import CORS_ORIGINS
from soilsense.errors import DeviceNotFound, InvalidRange, StoreUnavailable
from soilsense.logging_config import setup_logging
from soilsense.routes.devices import router as devices_router
from soilsense.routes.readings import router as readings_router

# Initialize logging before anything else
setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="SoilSense", version="0.1.0")
logger.info("FastAPI app created")

app.include_router(devices_router)
app.include_router(readings_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidRange)
async def invalid_range_handler(request: Request, exc: InvalidRange) -> JSONResponse:
    logger.info(f"Rejected {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(DeviceNotFound)
async def device_not_found_handler(request: Request, exc: DeviceNotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(StoreUnavailable)
async def store_unavailable_handler(request: Request, exc: StoreUnavailable) -> JSONResponse:
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.on_event("startup")
async def startup_event():
    logger.info("SoilSense starting up")
    logger.info("API docs available at http://localhost:8000/docs")


@app.get("/api/health")
async def health_check():
    return {"status": "ok"}
