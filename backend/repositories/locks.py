"""
Per-collection locks.
One threading.Lock per collection name, created on first use and kept for
the life of the registry. A registry-wide lock guards only the lookup.
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class LockRegistry:
    """Hands out exactly one reusable lock per collection."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(self, collection: str) -> threading.Lock:
        """Return the collection's lock (not acquired). Creates it on first call."""
        with self._guard:
            lock = self._locks.get(collection)
            if lock is None:
                lock = threading.Lock()
                self._locks[collection] = lock
            return lock

    @contextmanager
    def collection(self, collection: str) -> Iterator[None]:
        """Hold the collection's lock for the duration of the block."""
        lock = self.lock_for(collection)
        lock.acquire()
        try:
            yield
        finally:
            lock.release()

    def __contains__(self, collection: object) -> bool:
        with self._guard:
            return collection in self._locks

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
