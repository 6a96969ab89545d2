"""Persistence layer: abstract interface and implementations."""

from .base import StoreLogger, StoreProtocol
from .errors import (
    DeserializationError,
    InitializationError,
    InvalidNameError,
    NotFoundError,
    SerializationError,
    StoreError,
    StoreIOError,
)
from .file_store import FileStore, StoreOptions
from .locks import LockRegistry

__all__ = [
    "StoreLogger",
    "StoreProtocol",
    "FileStore",
    "StoreOptions",
    "LockRegistry",
    "StoreError",
    "InitializationError",
    "StoreIOError",
    "SerializationError",
    "DeserializationError",
    "NotFoundError",
    "InvalidNameError",
]
