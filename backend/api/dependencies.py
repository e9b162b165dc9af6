"""Shared dependencies for API routes."""

from services.job_store import JobStore, get_store


def get_job_store() -> JobStore:
    return get_store()
