"""Experience-years and education signals extracted from resume text."""

import re

from services.text_normalizer import normalize

# ---------------------------------------------------------------------------
# Experience duration extraction
# ---------------------------------------------------------------------------

# "5+ years", "3 yrs", "10 year" on normalized text
EXP_YEARS_RE = re.compile(r"(\d+)\s*(?:\+\s*)?(?:years?|yrs?)")


def _parse_years(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def estimate_years(text: str | None) -> int:
    """Best-guess years of experience: the largest figure mentioned.

    Resumes often state both a current-role tenure and a total career
    length, so the maximum is taken. Returns 0 when nothing matches.
    """
    found = [_parse_years(m.group(1)) for m in EXP_YEARS_RE.finditer(normalize(text))]
    years = [y for y in found if y is not None and y >= 0]
    return max(years) if years else 0


# ---------------------------------------------------------------------------
# Education markers
# ---------------------------------------------------------------------------

EDUCATION_MARKERS: list[str] = [
    r"b\.?\s?tech",
    r"m\.?\s?tech",
    r"b\.e\.",
    r"m\.e\.",
    r"mca",
    r"bca",
    r"b\.?sc",
    r"m\.?sc",
    r"bachelor(?:'?s)?",
    r"master'?s",
    r"master\s+of",
    r"computer\s+science",
    r"cse",
    r"information\s+technology",
]

_EDUCATION_RE = re.compile(
    rf"(?<![a-z0-9])(?:{'|'.join(EDUCATION_MARKERS)})(?![a-z0-9])",
    re.IGNORECASE,
)


def has_education(text: str | None) -> bool:
    """True if the text mentions a computing-related degree or field."""
    if not text:
        return False
    return _EDUCATION_RE.search(text) is not None
