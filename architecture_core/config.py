"""
Environment configuration for the Architecture Advisor service.

Values are read once at import time. A local .env file is loaded first so
development setups do not need to export variables by hand; in deployed
environments the variables come from the runtime settings.
"""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {value!r}")


# Logging
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
DEBUG: bool = _env_bool("DEBUG", False)

if DEBUG:
    LOG_LEVEL = "DEBUG"

# Pattern catalog
DATABASE_URL: Optional[str] = os.environ.get("DATABASE_URL") or None
SEED_ON_STARTUP: bool = _env_bool("SEED_ON_STARTUP", True)

# Gemini chat assistant
GOOGLE_API_KEY: Optional[str] = os.environ.get("GOOGLE_API_KEY") or None
USE_VERTEXAI: bool = _env_bool("GOOGLE_GENAI_USE_VERTEXAI", False)
GOOGLE_CLOUD_PROJECT: Optional[str] = os.environ.get("GOOGLE_CLOUD_PROJECT") or None
GOOGLE_CLOUD_LOCATION: str = os.environ.get("GOOGLE_CLOUD_LOCATION", "us-central1")
CHAT_MODEL: str = os.environ.get("CHAT_MODEL", "gemini-2.5-flash")
CHAT_HISTORY_LIMIT: int = _env_int("CHAT_HISTORY_LIMIT", 20)

# HTTP server
PORT: int = _env_int("PORT", 8000)
