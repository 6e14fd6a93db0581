from __future__ import annotations

import re
from collections import Counter

STOP_WORDS = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "by", "for", "from", "has", "have",
        "in", "is", "it", "of", "on", "or", "that", "the", "to", "was", "were", "will",
        "with", "you", "your", "our", "we", "this", "those", "these", "their", "they",
        "them", "about", "into", "over", "under", "between", "within", "across",
    }
)

SENIORITY_TERMS = (
    "intern",
    "junior",
    "mid",
    "senior",
    "staff",
    "lead",
    "principal",
    "manager",
    "director",
)

_TAG_RE = re.compile(r"<[^>]+>")
_ANY_TAG_RE = re.compile(r"<[^>]*>")
# Keeps tokens such as "c++", "node.js" and "c#" intact.
_NON_KEYWORD_RE = re.compile(r"[^a-z0-9+.#\-\s]")
_WHITESPACE_RE = re.compile(r"\s+")

MIN_TOKEN_LENGTH = 2
MAX_TOKEN_LENGTH = 32


def normalize_text(text: str) -> str:
    lowered = text.lower()
    lowered = _TAG_RE.sub(" ", lowered)
    return _NON_KEYWORD_RE.sub(" ", lowered)


def strip_html(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", _ANY_TAG_RE.sub(" ", text)).strip()


def tokenize(text: str) -> list[str]:
    return [
        token
        for token in normalize_text(text).split()
        if MIN_TOKEN_LENGTH <= len(token) <= MAX_TOKEN_LENGTH and token not in STOP_WORDS
    ]


def extract_keywords(text: str, limit: int = 120) -> list[str]:
    """Return the most frequent tokens, highest count first.

    Equal counts keep first-seen order.
    """
    if limit <= 0:
        return []
    counts = Counter(tokenize(text))
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [token for token, _ in ranked[:limit]]


def detect_seniority_cues(text: str) -> list[str]:
    lowered = text.lower()
    return [term for term in SENIORITY_TERMS if term in lowered]
