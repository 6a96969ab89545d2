"""
Record store configuration.
Single source of truth for environment and app settings.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def get_settings():
    """Return app settings (use as FastAPI Depends or call directly)."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    APP_TITLE: str = "Record Store API"
    APP_VERSION: str = "0.0.1"
    ALLOWED_ORIGINS: list[str]

    # Storage
    RECORDSTORE_DATA_DIR: Path
    RECORDSTORE_COLLECTION: str = "users"

    # Logging: DEBUG | INFO | WARNING | ERROR
    LOG_LEVEL: str = "INFO"

    def __init__(self):
        origins = os.environ.get("ALLOWED_ORIGINS", "http://localhost:3000")
        self.ALLOWED_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        data_dir = (os.environ.get("RECORDSTORE_DATA_DIR") or "./db").strip()
        self.RECORDSTORE_DATA_DIR = Path(data_dir)
        self.RECORDSTORE_COLLECTION = (
            os.environ.get("RECORDSTORE_COLLECTION") or "users"
        ).strip()
        self.LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()

    @property
    def log_level(self) -> int:
        """LOG_LEVEL as a logging module constant; unknown names fall back to INFO."""
        level = logging.getLevelName(self.LOG_LEVEL)
        return level if isinstance(level, int) else logging.INFO
