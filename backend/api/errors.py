"""Map store errors onto HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from repositories import (
    DeserializationError,
    InvalidNameError,
    NotFoundError,
    SerializationError,
    StoreError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = (
    (NotFoundError, 404),
    (InvalidNameError, 400),
    (SerializationError, 422),
    (DeserializationError, 500),
)


def status_for(exc: StoreError) -> int:
    for cls, status in STATUS_BY_ERROR:
        if isinstance(exc, cls):
            return status
    return 500


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    status = status_for(exc)
    if status >= 500:
        logger.error("Store error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        {"detail": str(exc), "collection": exc.collection, "key": exc.key},
        status_code=status,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreError, store_error_handler)
