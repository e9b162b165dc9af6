"""Word tokenization and Porter stemming for keyword matching."""

import re

from nltk.stem import PorterStemmer

# Porter's 1980 rules keep golden stems stable across NLTK releases,
# e.g. "managing", "managed" and "manages" all reduce to "manag".
_stemmer = PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM)

_NON_WORD_RE = re.compile(r"[^a-z0-9_]+")

MIN_TOKEN_LENGTH = 3

# ---------------------------------------------------------------------------
# Fixed English stop words. Shipped inline so tokenization never depends on
# a downloaded NLTK corpus.
# ---------------------------------------------------------------------------
STOP_WORDS: frozenset[str] = frozenset({
    "about", "above", "after", "again", "against", "all", "also", "and",
    "another", "any", "are", "because", "been", "before", "being", "below",
    "between", "both", "but", "came", "can", "come", "could", "did", "does",
    "doing", "down", "during", "each", "few", "for", "from", "further", "get",
    "got", "had", "has", "have", "having", "her", "here", "hers", "herself",
    "him", "himself", "his", "how", "into", "its", "itself", "just", "like",
    "make", "many", "might", "more", "most", "much", "must", "myself",
    "never", "nor", "not", "now", "off", "once", "only", "other", "our",
    "ours", "ourselves", "out", "over", "own", "said", "same", "see", "she",
    "should", "since", "some", "still", "such", "take", "than", "that",
    "the", "their", "theirs", "them", "themselves", "then", "there", "these",
    "they", "this", "those", "through", "too", "under", "until", "very",
    "was", "way", "well", "were", "what", "when", "where", "which", "while",
    "who", "whom", "why", "will", "with", "would", "you", "your", "yours",
    "yourself", "yourselves",
})


def word_tokens(text: str | None) -> list[str]:
    """Split text into lower-case word tokens at every non-word character.

    Compound terms are split at their punctuation: "node.js" -> ["node", "js"].
    """
    if not text:
        return []
    return [t for t in _NON_WORD_RE.split(text.lower()) if t]


def tokenize(text: str | None) -> list[str]:
    """Word tokens longer than two characters that are not stop words."""
    return [
        t for t in word_tokens(text)
        if len(t) >= MIN_TOKEN_LENGTH and t not in STOP_WORDS
    ]


def stem(token: str) -> str:
    """Reduce a single token to its Porter stem."""
    if not token:
        return ""
    return _stemmer.stem(token)


def stem_tokens(tokens: list[str]) -> list[str]:
    return [stem(t) for t in tokens]
