from __future__ import annotations

import re
from collections import Counter

from app.core.config.scoring import get_scoring_int
from app.normalize.utils import (
    collapse_whitespace,
    space_after_punctuation,
    split_camel_joins,
    split_digit_word_joins,
)

from .vocabulary import COMPOUND_TERM_REWRITES, STOPWORDS

_NON_WORD_RE = re.compile(r"[^A-Za-z0-9_\s]")
_ALPHA_TOKEN_RE = re.compile(r"[a-zA-Z]+")
_COMPOUND_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(rf"(?<![\w-]){re.escape(term)}(?![\w-])", re.IGNORECASE | re.ASCII), replacement)
    for term, replacement in COMPOUND_TERM_REWRITES
)


def apply_compound_rewrites(text: str) -> str:
    cleaned = text
    for pattern, replacement in _COMPOUND_PATTERNS:
        cleaned = pattern.sub(replacement, cleaned)
    return cleaned


def prepare_resume_text(text: str) -> str:
    """Resume side of the scorer: compound terms, boundary repair, then flatten."""
    cleaned = apply_compound_rewrites(text)
    cleaned, _ = split_camel_joins(cleaned)
    cleaned, _ = split_digit_word_joins(cleaned)
    cleaned, _ = space_after_punctuation(cleaned)
    cleaned = _NON_WORD_RE.sub(" ", cleaned.lower())
    return collapse_whitespace(cleaned)


def prepare_job_description_text(text: str) -> str:
    # Job descriptions are typed or pasted, so only case and punctuation are normalized.
    return _NON_WORD_RE.sub(" ", text.lower())


def extract_keywords(text: str) -> list[str]:
    """Frequent, non-stopword alphabetic tokens ordered by descending count.

    Ties keep first-seen order. Only tokens seen at least ``min_frequency``
    times survive and the list is capped at ``max_keywords``.
    """
    min_length = get_scoring_int("ats.keywords.min_token_length", 3)
    min_frequency = get_scoring_int("ats.keywords.min_frequency", 2)
    max_keywords = get_scoring_int("ats.keywords.max_keywords", 50)

    words: list[str] = []
    for token in text.split():
        if len(token) < min_length:
            continue
        lowered = token.lower()
        if lowered in STOPWORDS:
            continue
        if not _ALPHA_TOKEN_RE.fullmatch(token):
            continue
        words.append(lowered)

    counts = Counter(words)
    frequent = [word for word, count in counts.items() if count >= min_frequency]
    frequent.sort(key=lambda word: counts[word], reverse=True)
    return frequent[:max_keywords]
