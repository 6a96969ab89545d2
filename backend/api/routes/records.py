"""Record CRUD within a collection."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from api.deps import get_store
from repositories import StoreProtocol
from schemas.records import RecordEnvelope, RecordList

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/collections", tags=["records"])

StoreDep = Annotated[StoreProtocol, Depends(get_store)]


# Route handlers are sync: store calls block on locks and file I/O, so
# FastAPI runs them in its threadpool.

@router.get("/{collection}/records", response_model=RecordList)
def list_records(collection: str, store: StoreDep):
    records = store.read_all(collection)
    return RecordList(collection=collection, count=len(records), records=records)


@router.get("/{collection}/keys")
def list_keys(collection: str, store: StoreDep) -> list[str]:
    return sorted(store.keys(collection))


@router.put("/{collection}/records/{key}", response_model=RecordEnvelope)
def put_record(
    collection: str,
    key: str,
    store: StoreDep,
    data: Annotated[Any, Body()] = None,
):
    store.write(collection, key, data)
    return RecordEnvelope(collection=collection, key=key, data=data)


@router.get("/{collection}/records/{key}", response_model=RecordEnvelope)
def get_record(collection: str, key: str, store: StoreDep):
    return RecordEnvelope(collection=collection, key=key, data=store.read(collection, key))


@router.delete("/{collection}/records/{key}")
def delete_record(collection: str, key: str, store: StoreDep):
    store.delete(collection, key)
    return {"deleted": True, "collection": collection, "key": key}
