"""Pydantic contracts for stored records."""

from models.schemas.records import JobRecord, ResumeRecord

__all__ = [
    "JobRecord",
    "ResumeRecord",
]
