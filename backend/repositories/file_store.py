"""
File-based implementation of StoreProtocol.
Layout on disk:
  <data_dir>/
    <collection>/
      <key>.json   one pretty-printed JSON document per record
Every operation holds the collection's lock from the LockRegistry for its
full duration. Different collections never block each other.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from .base import StoreLogger
from .errors import (
    DeserializationError,
    InitializationError,
    InvalidNameError,
    NotFoundError,
    SerializationError,
    StoreIOError,
)
from .locks import LockRegistry

DIR_MODE = 0o755
RECORD_SUFFIX = ".json"


@dataclass
class StoreOptions:
    """Optional FileStore configuration."""

    logger: StoreLogger = field(default_factory=lambda: logging.getLogger(__name__))
    suffix: str = RECORD_SUFFIX


def _check_name(kind: str, value: str) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidNameError(f"{kind} name must be a non-empty string")
    if value in (".", ".."):
        raise InvalidNameError(f"{kind} name {value!r} is reserved")
    banned = {"/", "\\", "\x00", os.sep}
    if os.altsep:
        banned.add(os.altsep)
    if any(ch in value for ch in banned):
        raise InvalidNameError(f"{kind} name {value!r} contains a path separator")


class FileStore:
    """Collection-scoped JSON records, one file per key."""

    def __init__(self, data_dir, options: Optional[StoreOptions] = None):
        opts = options or StoreOptions()
        self.data_dir = Path(os.path.normpath(os.path.expanduser(str(data_dir))))
        self.suffix = opts.suffix
        self._log = opts.logger
        self._locks = LockRegistry()

        if self.data_dir.is_dir():
            self._log.debug("Using existing database directory '%s'", self.data_dir)
            return
        self._log.info("Creating database directory at '%s'", self.data_dir)
        try:
            self.data_dir.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise InitializationError(
                f"could not create database directory '{self.data_dir}': {e}"
            ) from e

    @property
    def locks(self) -> LockRegistry:
        return self._locks

    # ── Paths ──────────────────────────────────────────────────────────

    def collection_dir(self, collection: str) -> Path:
        _check_name("collection", collection)
        return self.data_dir / collection

    def record_path(self, collection: str, key: str) -> Path:
        _check_name("key", key)
        return self.collection_dir(collection) / f"{key}{self.suffix}"

    # ── Encoding ───────────────────────────────────────────────────────

    def _encode(self, payload: Any, collection: str, key: str) -> bytes:
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json")
        try:
            text = json.dumps(payload, ensure_ascii=False, indent=2, allow_nan=False)
            return text.encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(
                f"could not serialize record {key!r}: {e}", collection, key
            ) from e

    def _load(self, path: Path, collection: str, key: str, model: Optional[type]) -> Any:
        """Read and decode one record file. Caller holds the collection lock."""
        try:
            raw = path.read_bytes()
        except FileNotFoundError as e:
            raise NotFoundError(
                f"record {key!r} not found in collection {collection!r}", collection, key
            ) from e
        except OSError as e:
            raise StoreIOError(f"could not read file '{path}': {e}", collection, key) from e
        try:
            data = json.loads(raw.decode("utf-8"))
            if model is not None:
                return model.model_validate(data)
            return data
        except (ValueError, ValidationError) as e:
            raise DeserializationError(
                f"could not deserialize record {key!r}: {e}", collection, key
            ) from e

    # ── Operations ─────────────────────────────────────────────────────

    def write(self, collection: str, key: str, payload: Any) -> None:
        """Serialize payload and atomically replace <collection>/<key>.json."""
        path = self.record_path(collection, key)
        with self._locks.collection(collection):
            data = self._encode(payload, collection, key)
            try:
                path.parent.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
            except OSError as e:
                raise StoreIOError(
                    f"could not create collection directory: {e}", collection, key
                ) from e
            tmp = path.with_name(path.name + ".tmp")
            try:
                with open(tmp, "wb") as f:
                    f.write(data)
                tmp.replace(path)
            except OSError as e:
                raise StoreIOError(
                    f"could not write data to file '{path}': {e}", collection, key
                ) from e
            finally:
                tmp.unlink(missing_ok=True)
            self._log.info("Wrote record %s to collection %s", key, collection)

    def read(self, collection: str, key: str, model: Optional[type] = None) -> Any:
        """Return the decoded record, validated into `model` when given."""
        path = self.record_path(collection, key)
        with self._locks.collection(collection):
            return self._load(path, collection, key, model)

    def read_all(self, collection: str, model: Optional[type] = None) -> list:
        """
        Return every readable record in the collection, in directory order.
        Records that fail to read are logged and skipped. The collection lock
        is held for the whole scan.
        """
        directory = self.collection_dir(collection)
        records = []
        with self._locks.collection(collection):
            try:
                with os.scandir(directory) as entries:
                    names = [
                        e.name for e in entries
                        if e.is_file() and e.name.endswith(self.suffix)
                        and len(e.name) > len(self.suffix)
                    ]
            except OSError as e:
                raise StoreIOError(
                    f"could not read directory '{directory}': {e}", collection
                ) from e
            for name in names:
                key = name[: -len(self.suffix)]
                try:
                    records.append(self._load(directory / name, collection, key, model))
                except (DeserializationError, StoreIOError, NotFoundError) as e:
                    self._log.error("Error reading record file %s: %s", name, e)
        return records

    def keys(self, collection: str) -> list[str]:
        """Keys present in the collection; empty if it was never written."""
        directory = self.collection_dir(collection)
        with self._locks.collection(collection):
            if not directory.is_dir():
                return []
            try:
                return [
                    p.name[: -len(self.suffix)]
                    for p in directory.iterdir()
                    if p.is_file() and p.name.endswith(self.suffix)
                    and len(p.name) > len(self.suffix)
                ]
            except OSError as e:
                raise StoreIOError(
                    f"could not read directory '{directory}': {e}", collection
                ) from e

    def delete(self, collection: str, key: str) -> None:
        """Remove <collection>/<key>.json."""
        path = self.record_path(collection, key)
        with self._locks.collection(collection):
            try:
                path.unlink()
            except FileNotFoundError as e:
                raise NotFoundError(
                    f"record {key!r} not found in collection {collection!r}", collection, key
                ) from e
            except OSError as e:
                raise StoreIOError(f"could not delete file '{path}': {e}", collection, key) from e
            self._log.info("Deleted record %s from collection %s", key, collection)
