import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DATABASE_PATH = os.getenv("DATABASE_PATH", "../data/soilsense.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", str(Path(__file__).parent.parent.parent / "logs"))

# Used for devices registered without an explicit check interval
DEFAULT_CHECK_INTERVAL_MINUTES = int(os.getenv("DEFAULT_CHECK_INTERVAL_MINUTES", "5"))

# Unknown range tokens fall back to "month" unless this is set
STRICT_RANGE_TOKENS = os.getenv("STRICT_RANGE_TOKENS", "false").lower() in ("1", "true", "yes")

# IANA zone for hour-of-day bucketing; empty means the server's local zone
LOCAL_TIMEZONE = os.getenv("LOCAL_TIMEZONE") or None

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
