"""
Quality standard: Configuration via environment.
Reason: Keep paths and limits out of the code so the same build runs locally,
in tests and on the server. The .env file is loaded before anything reads os.environ.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


ENVIRONMENT = os.environ.get("ENVIRONMENT", "development").lower()
IS_PRODUCTION = ENVIRONMENT == "production"

# SQLite inside data/, same as the collection database
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite+aiosqlite:///./data/lex_events.db")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.environ.get("LOG_DIR", "logs")

# Response-size cap for the live listing
MAX_LIVE_EVENTS = int(os.environ.get("MAX_LIVE_EVENTS", "100"))

SEED_DATABASE = _as_bool(os.environ.get("SEED_DATABASE", "true"))

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))
