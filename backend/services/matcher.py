"""Skill matching against resume text.

Two strategies live here:

1. ``word_hit``: exact phrase match on normalized text, delimited so that
   "go" does not match inside "ongoing" and "java" not inside "javascript".
   Used for explicit skill lists and must-have checks.
2. ``match_stems``: stem-set membership, a looser match used for bulk
   coverage against an auto-extracted keyword list.
"""

import re

from services.text_normalizer import normalize
from services.tokenizer import stem_tokens, word_tokens


def _phrase_pattern(phrase: str) -> re.Pattern | None:
    """Compile a boundary-delimited pattern for a normalized phrase.

    Returns None when the phrase has no content.
    """
    words = normalize(phrase).split()
    if not words:
        return None
    body = r"\s+".join(re.escape(w) for w in words)
    # Alphanumeric lookarounds instead of \b so "c++" and "c#" still match
    # when followed by a space.
    return re.compile(rf"(?<![a-z0-9]){body}(?![a-z0-9])")


def word_hit(text: str | None, phrase: str | None) -> bool:
    """True if ``phrase`` occurs in ``text`` as a whole word or phrase.

    An empty phrase never matches.
    """
    pattern = _phrase_pattern(phrase or "")
    if pattern is None:
        return False
    return pattern.search(normalize(text)) is not None


def stem_set(text: str | None) -> set[str]:
    """Stems of every word token in the text, without stop-word filtering."""
    return set(stem_tokens(word_tokens(text)))


def match_stems(text: str | None, keyword_stems: list[str]) -> list[str]:
    """Keywords whose stem appears in the text, in keyword order."""
    stems = stem_set(text)
    return [k for k in keyword_stems if k in stems]
