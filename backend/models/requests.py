from pydantic import BaseModel, Field

from services.scorer import ScoringStrategy


class KeywordsRequest(BaseModel):
    text: str = Field("", max_length=10000, description="Job description text")


class ScoreRequest(BaseModel):
    jd_text: str = Field("", max_length=10000, description="Job description text")
    resume_text: str = Field("", max_length=50000, description="Plain text resume content")
    jd_skills: list[str] | None = Field(None, description="Explicit skill list; derived from jd_text when empty")
    must_have: list[str] = Field(default_factory=list, description="Skills whose absence is penalized")


class CoverageRequest(BaseModel):
    resume_text: str = Field("", max_length=50000, description="Plain text resume content")
    jd_keywords: list[str] = Field(default_factory=list, description="Stemmed job keywords")


class CreateJobRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    skills: list[str] = Field(default_factory=list)
    must_have: list[str] = Field(default_factory=list)
    strategy: ScoringStrategy = Field(
        ScoringStrategy.COVERAGE_ONLY, description="Score scale used for every resume filed under the job"
    )
