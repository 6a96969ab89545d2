"""Record and response models for the record store API."""

from typing import Any

from pydantic import BaseModel


class UserRecord(BaseModel):
    Name: str
    Age: int
    Company: str = ""
    Address: str = ""


class RecordEnvelope(BaseModel):
    collection: str
    key: str
    data: Any = None


class RecordList(BaseModel):
    collection: str
    count: int
    records: list[Any]
