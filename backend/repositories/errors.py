"""Errors raised by the record store. Every store failure is a StoreError."""

from typing import Optional


class StoreError(Exception):
    """Base class for record store failures."""

    def __init__(
        self,
        message: str,
        collection: Optional[str] = None,
        key: Optional[str] = None,
    ):
        super().__init__(message)
        self.collection = collection
        self.key = key


class InitializationError(StoreError):
    """The root directory could not be created or used."""


class StoreIOError(StoreError):
    """Directory or file operation failed at the OS boundary."""


class SerializationError(StoreError):
    """Payload could not be encoded as JSON."""


class DeserializationError(StoreError):
    """On-disk content is not a valid encoded payload."""


class NotFoundError(StoreError):
    """No record exists for the requested key."""


class InvalidNameError(StoreError, ValueError):
    """Collection or key cannot be used as a path segment."""
