"""Shared test configuration, fixtures and pytest markers."""

import pytest

from api.router import limiter
from services import job_store


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end scoring scenarios with pinned numbers"
    )


@pytest.fixture(autouse=True)
def fresh_store():
    """Every test starts with an empty job store and no rate limiting."""
    job_store.clear()
    limiter.enabled = False
    yield job_store.get_store()
    job_store.clear()


RESUME_TEXT = """Jane Smith
jane@example.com

Summary
Backend engineer with 6 years experience building Python and React apps.

Experience
Senior Engineer | Acme | 3 years
- Managed PostgreSQL databases and Docker deployments
- Built REST APIs with FastAPI

Education
B.Tech, Computer Science
"""


@pytest.fixture
def resume_text() -> str:
    return RESUME_TEXT
