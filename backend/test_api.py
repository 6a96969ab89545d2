"""Tests for the HTTP API using FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_store
from main import app
from repositories import FileStore


@pytest.fixture()
def store(tmp_path):
    return FileStore(tmp_path / "db")


@pytest.fixture()
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"
    assert res.json()["version"] == "0.0.1"


def test_put_get_list_delete(client, store):
    alice = {"Name": "Alice", "Age": 30}
    res = client.put("/api/collections/users/records/alice", json=alice)
    assert res.status_code == 200
    assert res.json() == {"collection": "users", "key": "alice", "data": alice}
    assert (store.data_dir / "users" / "alice.json").exists()

    res = client.get("/api/collections/users/records/alice")
    assert res.status_code == 200
    assert res.json()["data"] == alice

    res = client.get("/api/collections/users/records")
    assert res.json() == {"collection": "users", "count": 1, "records": [alice]}

    assert client.get("/api/collections/users/keys").json() == ["alice"]

    res = client.delete("/api/collections/users/records/alice")
    assert res.status_code == 200
    assert res.json()["deleted"] is True

    res = client.get("/api/collections/users/records/alice")
    assert res.status_code == 404
    assert res.json()["key"] == "alice"


def test_delete_missing_is_404(client):
    assert client.delete("/api/collections/users/records/ghost").status_code == 404


def test_list_missing_collection_is_500(client):
    res = client.get("/api/collections/nothing/records")
    assert res.status_code == 500
    assert res.json()["collection"] == "nothing"


def test_invalid_name_is_400(client):
    res = client.get("/api/collections/users/records/a%5Cb")
    assert res.status_code == 400


def test_corrupt_record_is_500_but_listing_survives(client, store):
    client.put("/api/collections/users/records/ok", json={"fine": True})
    (store.data_dir / "users" / "bad.json").write_text("{")
    assert client.get("/api/collections/users/records/bad").status_code == 500
    res = client.get("/api/collections/users/records")
    assert res.status_code == 200
    assert res.json()["records"] == [{"fine": True}]
