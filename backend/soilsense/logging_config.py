"""Logging configuration for SoilSense."""

import logging
from datetime import datetime
from pathlib import Path

from soilsense.config import LOG_DIR, LOG_LEVEL


def setup_logging() -> None:
    """Configure logging with file and console handlers."""
    logs_dir = Path(LOG_DIR)
    logs_dir.mkdir(parents=True, exist_ok=True)

    # One log file per day
    log_file = logs_dir / f"soilsense-{datetime.now().strftime('%Y-%m-%d')}.log"

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.INFO)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # Quiet down noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logging.getLogger("soilsense").setLevel(logging.INFO)
    logging.getLogger("soilsense.aggregation").setLevel(logging.INFO)
    logging.getLogger("soilsense.routes").setLevel(logging.INFO)

    logging.info(f"Logging initialized - file: {log_file}")
