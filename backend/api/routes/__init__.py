"""API route modules."""

from .health import router as health_router
from .records import router as records_router

__all__ = [
    "health_router",
    "records_router",
]
