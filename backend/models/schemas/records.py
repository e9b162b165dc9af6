"""Stored job and resume records."""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field


def _new_id() -> str:
    return uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


class JobRecord(BaseModel):
    """A job description plus its skill taxonomy.

    ``keywords`` starts empty and is filled once with the stems extracted
    from ``description`` the first time a resume is scored against it.
    ``strategy`` fixes the score scale for every resume filed under the job.
    """
    id: str = Field(default_factory=_new_id)
    title: str
    description: str = ""
    skills: list[str] = []
    must_have: list[str] = []
    keywords: list[str] = []
    strategy: str = "coverage_only"
    created_at: datetime = Field(default_factory=_now)


class ResumeRecord(BaseModel):
    id: str = Field(default_factory=_new_id)
    job_id: str
    file_name: str
    score: float = 0.0
    matched_skills: list[str] = []
    strategy: str = "coverage_only"
    created_at: datetime = Field(default_factory=_now)
