from datetime import datetime

from pydantic import BaseModel, Field


class MatchReasons(BaseModel):
    matched_skills: list[str] = []
    missing_must: list[str] = []
    est_years: int = Field(0, ge=0)


class WeightedScore(BaseModel):
    """Rich score on a 0-1 scale with an explanation of what matched."""

    score: float = Field(0.0, ge=0.0, le=1.0)
    reasons: MatchReasons = MatchReasons()


class CoverageScore(BaseModel):
    """Simple keyword coverage percentage on a 0-100 scale."""

    score: float = Field(0.0, ge=0.0, le=100.0)
    matched: list[str] = []


class KeywordsResponse(BaseModel):
    keywords: list[str] = []


class JobResponse(BaseModel):
    id: str
    title: str
    description: str = ""
    skills: list[str] = []
    must_have: list[str] = []
    keywords: list[str] = []
    strategy: str
    created_at: datetime


class ResumeResponse(BaseModel):
    id: str
    job_id: str
    file_name: str
    score: float
    matched_skills: list[str] = []
    strategy: str
    created_at: datetime


class UploadResponse(BaseModel):
    success: bool = True
    score: float
    matched: list[str] = []
    resume: ResumeResponse
