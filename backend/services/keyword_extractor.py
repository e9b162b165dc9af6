"""Keyword extraction for job descriptions without an explicit skill list.

Produces the stemmed keyword taxonomy that resumes are scored against by
the coverage-only strategy. The result is deterministic; persisting it on
the job record is the job store's concern, not this module's.
"""

import logging

from services.text_normalizer import normalize
from services.tokenizer import stem_tokens, tokenize

logger = logging.getLogger(__name__)

# Upper bound on distinct keyword stems kept per job description
MAX_KEYWORDS = 200


def _dedupe(items: list[str]) -> list[str]:
    """Drop repeats while keeping first-seen order."""
    return list(dict.fromkeys(items))


def extract_keywords(job_description: str | None, limit: int = MAX_KEYWORDS) -> list[str]:
    """Derive up to ``limit`` distinct keyword stems from a job description.

    Pipeline: normalize -> tokenize (stop words and short tokens dropped)
    -> Porter stem -> dedupe in order of first appearance -> truncate.
    """
    tokens = tokenize(normalize(job_description))
    keywords = _dedupe(stem_tokens(tokens))[:limit]
    logger.debug("Extracted %d keyword stems from %d tokens", len(keywords), len(tokens))
    return keywords
