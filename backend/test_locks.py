"""Tests for the per-collection lock registry."""

import threading
from concurrent.futures import ThreadPoolExecutor

from repositories import LockRegistry


def test_same_collection_returns_same_lock():
    registry = LockRegistry()
    assert registry.lock_for("users") is registry.lock_for("users")
    assert len(registry) == 1


def test_different_collections_get_different_locks():
    registry = LockRegistry()
    assert registry.lock_for("users") is not registry.lock_for("orders")
    assert "users" in registry and "orders" in registry
    assert "missing" not in registry


def test_lock_is_returned_unacquired():
    lock = LockRegistry().lock_for("users")
    assert lock.acquire(blocking=False)
    lock.release()


def test_concurrent_first_access_creates_one_lock():
    registry = LockRegistry()
    barrier = threading.Barrier(16)

    def grab(_):
        barrier.wait()
        return registry.lock_for("fresh")

    with ThreadPoolExecutor(max_workers=16) as pool:
        locks = list(pool.map(grab, range(16)))

    assert len({id(lock) for lock in locks}) == 1
    assert len(registry) == 1


def test_collection_context_releases_on_error():
    registry = LockRegistry()
    try:
        with registry.collection("users"):
            assert registry.lock_for("users").locked()
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    assert not registry.lock_for("users").locked()
