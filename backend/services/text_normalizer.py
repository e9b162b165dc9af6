"""Canonical lower-case form for resume and job description text."""

import re

# Everything outside this alphabet collapses to a single space. Keeping
# "+", "." and "#" preserves tech terms like "c++", "c#" and "node.js".
_DISALLOWED_RE = re.compile(r"[^a-z0-9+.# ]+")


def normalize(text: str | None) -> str:
    """Lower-case text and replace each run of disallowed characters with one space.

    Missing text is treated as an empty string.
    """
    if not text:
        return ""
    return _DISALLOWED_RE.sub(" ", text.lower())
