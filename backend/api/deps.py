"""FastAPI dependencies for routes."""

import logging
from functools import lru_cache

from config import get_settings
from repositories import FileStore

logger = logging.getLogger(__name__)


@lru_cache
def get_store() -> FileStore:
    """Return the process-wide record store. Use in Depends()."""
    settings = get_settings()
    logger.info("Opening record store at %s", settings.RECORDSTORE_DATA_DIR)
    return FileStore(settings.RECORDSTORE_DATA_DIR)
