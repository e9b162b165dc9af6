"""Resume-to-job scoring.

Two strategies, selected by the caller:

- ``weighted``: skill coverage, experience, education and a must-have
  penalty combined into a 0-1 score with an explanation.
- ``coverage_only``: percentage of job keyword stems present in the
  resume, 0-100. Used by the upload pipeline.

Both are pure functions of their arguments.
"""

import logging
import re
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from models.responses import CoverageScore, MatchReasons, WeightedScore
from services.experience_parser import estimate_years, has_education
from services.matcher import match_stems, word_hit
from services.text_normalizer import normalize

logger = logging.getLogger(__name__)

# Weights for the weighted strategy. Deliberately not configurable per call.
W_COVERAGE = 0.60
W_EXPERIENCE = 0.25
W_EDUCATION = 0.10
MUST_HAVE_PENALTY = 0.05
MAX_PENALTY = 0.25
EXPERIENCE_CAP_YEARS = 8

MAX_MATCHED_SKILLS = 20

# Derived skill fragments must be strictly longer/shorter than these
MIN_FRAGMENT_LENGTH = 2
MAX_FRAGMENT_LENGTH = 24

_FRAGMENT_SPLIT_RE = re.compile(r"[,/\n]")


class ScoringStrategy(str, Enum):
    WEIGHTED = "weighted"
    COVERAGE_ONLY = "coverage_only"


def _round_half_up(value: float, places: int) -> float:
    """Round like a person would: 0.7875 -> 0.788, not banker's rounding."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _unique_by_normalized(skills: list[str]) -> list[str]:
    """Keep the first skill for each normalized key, skipping blank ones."""
    seen: set[str] = set()
    unique = []
    for skill in skills:
        key = " ".join(normalize(skill).split())
        if key and key not in seen:
            seen.add(key)
            unique.append(skill)
    return unique


def derive_skills(job_description: str | None) -> list[str]:
    """Split a job description into short skill-like fragments.

    Splits on commas, slashes and newlines before normalizing, so
    "React, Node.js / SQL" yields ["react", "node.js", "sql"]. Trailing
    sentence periods are dropped ("Git." -> "git"); leading dots stay
    (".NET" -> ".net").
    """
    fragments = []
    for raw in _FRAGMENT_SPLIT_RE.split(job_description or ""):
        fragment = " ".join(normalize(raw).rstrip(". ").split())
        if MIN_FRAGMENT_LENGTH < len(fragment) < MAX_FRAGMENT_LENGTH:
            fragments.append(fragment)
    return list(dict.fromkeys(fragments))


def effective_skills(job_description: str | None, jd_skills: list[str] | None) -> list[str]:
    """The explicit skill list when one is given, else skills derived from the JD."""
    if jd_skills:
        return _unique_by_normalized(jd_skills)
    return derive_skills(job_description)


def compute_coverage(resume_text: str | None, skills: list[str]) -> tuple[list[str], float]:
    """Return (hits, coverage) where coverage is in [0, 1]."""
    hits = [s for s in skills if word_hit(resume_text, s)]
    return hits, len(hits) / max(len(skills), 1)


def compute_penalty(missing_count: int) -> float:
    return min(MAX_PENALTY, MUST_HAVE_PENALTY * missing_count)


def score_resume(
    job_description: str | None,
    resume_text: str | None,
    jd_skills: list[str] | None = None,
    must_have: list[str] | None = None,
) -> WeightedScore:
    """Weighted score in [0, 1] with matched skills, missing must-haves and years."""
    skills = effective_skills(job_description, jd_skills)
    hits, coverage = compute_coverage(resume_text, skills)

    years = estimate_years(resume_text)
    exp_score = min(years / EXPERIENCE_CAP_YEARS, 1)
    edu_score = 1 if has_education(resume_text) else 0

    missing_must = [m for m in (must_have or []) if not word_hit(resume_text, m)]
    penalty = compute_penalty(len(missing_must))

    raw = (
        W_COVERAGE * coverage
        + W_EXPERIENCE * exp_score
        + W_EDUCATION * edu_score
        - penalty
    )
    final = max(0.0, min(1.0, raw))
    logger.debug(
        "coverage=%.3f exp=%.3f edu=%d penalty=%.2f final=%.4f",
        coverage, exp_score, edu_score, penalty, final,
    )

    return WeightedScore(
        score=_round_half_up(final, 3),
        reasons=MatchReasons(
            matched_skills=hits[:MAX_MATCHED_SKILLS],
            missing_must=missing_must,
            est_years=years,
        ),
    )


def score_coverage(resume_text: str | None, jd_keywords: list[str]) -> CoverageScore:
    """Percentage of keyword stems present in the resume, rounded to 2 decimals."""
    matched = match_stems(resume_text, jd_keywords)
    if not jd_keywords:
        return CoverageScore(score=0.0, matched=matched)
    percent = len(matched) / len(jd_keywords) * 100
    return CoverageScore(score=_round_half_up(percent, 2), matched=matched)
