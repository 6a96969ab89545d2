"""Pydantic schemas for records and API responses."""

from .records import RecordEnvelope, RecordList, UserRecord

__all__ = [
    "RecordEnvelope",
    "RecordList",
    "UserRecord",
]
