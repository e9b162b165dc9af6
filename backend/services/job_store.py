"""In-memory job and resume record store.

Owns the one piece of shared mutable state in the service. The scoring
engine never writes here; callers use ``upsert_keywords`` to cache a
derived keyword taxonomy on the job (cache-aside).

Follows the same pattern as the rest of the services: global singleton,
created on first use.
"""

import logging
import threading

from models.schemas.records import JobRecord, ResumeRecord

logger = logging.getLogger(__name__)


class JobNotFoundError(KeyError):
    """Raised when a job id has no record."""


class StrategyMismatchError(ValueError):
    """Raised when a resume was scored on a different scale than its job."""


class JobStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._jobs: dict[str, JobRecord] = {}
        self._resumes: list[ResumeRecord] = []

    def create_job(
        self,
        title: str,
        description: str = "",
        skills: list[str] | None = None,
        must_have: list[str] | None = None,
        strategy: str = "coverage_only",
    ) -> JobRecord:
        job = JobRecord(
            title=title,
            description=description,
            skills=list(skills or []),
            must_have=list(must_have or []),
            strategy=strategy,
        )
        with self._lock:
            self._jobs[job.id] = job
        logger.info("Created job %s (%s)", job.id, title)
        return job.model_copy(deep=True)

    def get_job(self, job_id: str) -> JobRecord:
        with self._lock:
            job = self._jobs.get(job_id)
            if job is None:
                raise JobNotFoundError(job_id)
            return job.model_copy(deep=True)

    def list_jobs(self) -> list[JobRecord]:
        with self._lock:
            jobs = [j.model_copy(deep=True) for j in self._jobs.values()]
        return sorted(jobs, key=lambda j: j.created_at, reverse=True)

    def upsert_keywords(self, job_id: str, keywords: list[str]) -> JobRecord:
        """Store keywords on a job unless it already has some.

        Idempotent: a job's keywords are written at most once, so repeated
        or concurrent calls leave the first stored taxonomy in place.
        """
        with self._lock:
            job = self._jobs.get(job_id)
            if job is None:
                raise JobNotFoundError(job_id)
            if not job.keywords and keywords:
                job.keywords = list(keywords)
                logger.info("Cached %d keywords on job %s", len(keywords), job_id)
            return job.model_copy(deep=True)

    def add_resume(self, resume: ResumeRecord) -> ResumeRecord:
        """File a scored resume under its job.

        The resume must use the job's strategy so that every score ranked
        together by ``list_resumes`` shares one scale.
        """
        with self._lock:
            job = self._jobs.get(resume.job_id)
            if job is None:
                raise JobNotFoundError(resume.job_id)
            if resume.strategy != job.strategy:
                raise StrategyMismatchError(
                    f"Job {job.id} scores with {job.strategy}, got {resume.strategy}"
                )
            self._resumes.append(resume)
        return resume.model_copy(deep=True)

    def list_resumes(self, job_id: str) -> list[ResumeRecord]:
        """Resumes scored against a job, best score first."""
        with self._lock:
            if job_id not in self._jobs:
                raise JobNotFoundError(job_id)
            resumes = [r.model_copy(deep=True) for r in self._resumes if r.job_id == job_id]
        return sorted(resumes, key=lambda r: r.score, reverse=True)


_store: JobStore | None = None
_store_lock = threading.Lock()


def get_store() -> JobStore:
    """Process-wide store, created on first access."""
    global _store
    with _store_lock:
        if _store is None:
            _store = JobStore()
        return _store


def clear() -> None:
    """Drop all records. Useful for testing."""
    global _store
    with _store_lock:
        _store = None
