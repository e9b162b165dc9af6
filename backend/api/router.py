import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, Response, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_job_store
from config import settings
from models.requests import CoverageRequest, CreateJobRequest, KeywordsRequest, ScoreRequest
from models.responses import (
    CoverageScore,
    JobResponse,
    KeywordsResponse,
    ResumeResponse,
    UploadResponse,
    WeightedScore,
)
from models.schemas.records import JobRecord, ResumeRecord
from services import csv_export, document_parser, keyword_extractor, scorer
from services.job_store import JobNotFoundError, JobStore
from services.scorer import ScoringStrategy

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _load_job(store: JobStore, job_id: str) -> JobRecord:
    try:
        return store.get_job(job_id)
    except JobNotFoundError:
        raise HTTPException(status_code=404, detail="Job description not found")


def _job_keywords(store: JobStore, job: JobRecord) -> list[str]:
    """Cached keyword stems for a job, extracting and storing them on first use."""
    if job.keywords:
        return job.keywords
    keywords = keyword_extractor.extract_keywords(job.description)
    return store.upsert_keywords(job.id, keywords).keywords or keywords


def _score_for_job(
    store: JobStore, job: JobRecord, resume_text: str, strategy: ScoringStrategy
) -> tuple[float, list[str]]:
    if strategy is ScoringStrategy.WEIGHTED:
        result = scorer.score_resume(job.description, resume_text, job.skills, job.must_have)
        return result.score, result.reasons.matched_skills
    coverage = scorer.score_coverage(resume_text, _job_keywords(store, job))
    return coverage.score, coverage.matched


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/keywords", response_model=KeywordsResponse)
@limiter.limit(settings.rate_limit)
async def extract_keywords(request: Request, body: KeywordsRequest):
    return KeywordsResponse(keywords=keyword_extractor.extract_keywords(body.text))


@router.post("/score", response_model=WeightedScore)
@limiter.limit(settings.rate_limit)
async def score(request: Request, body: ScoreRequest):
    return scorer.score_resume(body.jd_text, body.resume_text, body.jd_skills, body.must_have)


@router.post("/score/coverage", response_model=CoverageScore)
@limiter.limit(settings.rate_limit)
async def score_coverage(request: Request, body: CoverageRequest):
    return scorer.score_coverage(body.resume_text, body.jd_keywords)


@router.post("/jobs", response_model=JobResponse, status_code=201)
async def create_job(body: CreateJobRequest, store: JobStore = Depends(get_job_store)):
    if len(body.description) > settings.max_jd_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_jd_chars} chars)",
        )
    job = store.create_job(
        body.title, body.description, body.skills, body.must_have, body.strategy.value
    )
    return JobResponse(**job.model_dump())


@router.get("/jobs", response_model=list[JobResponse])
async def list_jobs(store: JobStore = Depends(get_job_store)):
    return [JobResponse(**j.model_dump()) for j in store.list_jobs()]


@router.get("/jobs/{job_id}", response_model=JobResponse)
async def get_job(job_id: str, store: JobStore = Depends(get_job_store)):
    return JobResponse(**_load_job(store, job_id).model_dump())


@router.get("/jobs/{job_id}/resumes", response_model=list[ResumeResponse])
async def list_resumes(job_id: str, store: JobStore = Depends(get_job_store)):
    job = _load_job(store, job_id)
    return [ResumeResponse(**r.model_dump()) for r in store.list_resumes(job.id)]


@router.get("/jobs/{job_id}/resumes.csv")
async def export_resumes(job_id: str, store: JobStore = Depends(get_job_store)):
    job = _load_job(store, job_id)
    rows = [
        {
            "file_name": r.file_name,
            "score": r.score,
            "strategy": r.strategy,
            "matched_skills": r.matched_skills,
            "created_at": r.created_at.isoformat(),
        }
        for r in store.list_resumes(job.id)
    ]
    return Response(
        content=csv_export.to_csv(rows),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="resumes_{job.id}.csv"'},
    )


@router.post("/upload-resume", response_model=UploadResponse)
@limiter.limit(settings.rate_limit)
async def upload_resume(
    request: Request,
    resume: UploadFile = File(...),
    jd_id: str = Form(...),
    strategy: ScoringStrategy | None = Form(None),
    store: JobStore = Depends(get_job_store),
):
    file_name = resume.filename or "resume"

    # Read and validate size
    content = await resume.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        resume_text = document_parser.extract_text(content, file_name)
    except document_parser.UnsupportedDocumentError:
        raise HTTPException(status_code=400, detail="Only PDF, DOCX or plain text files are accepted")
    except Exception:
        logger.warning("Could not parse uploaded file %s", file_name, exc_info=True)
        raise HTTPException(status_code=400, detail="Could not parse uploaded file")

    if not resume_text:
        logger.warning("No text extracted from %s, scoring as empty", file_name)

    job = _load_job(store, jd_id)
    job_strategy = ScoringStrategy(job.strategy)
    if strategy is not None and strategy is not job_strategy:
        raise HTTPException(
            status_code=400,
            detail=f"Job scores resumes with the {job_strategy.value} strategy",
        )
    score, matched = _score_for_job(store, job, resume_text, job_strategy)

    record = store.add_resume(
        ResumeRecord(
            job_id=job.id,
            file_name=file_name,
            score=score,
            matched_skills=matched,
            strategy=job_strategy.value,
        )
    )
    logger.info("Scored %s against job %s: %s (%s)", file_name, job.id, score, job_strategy.value)
    return UploadResponse(
        score=score,
        matched=matched,
        resume=ResumeResponse(**record.model_dump()),
    )
