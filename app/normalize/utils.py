from __future__ import annotations

import re

_CAMEL_JOIN_RE = re.compile(r"\b([a-z]+)([A-Z])([a-z]+)\b", re.ASCII)
_DIGIT_WORD_JOIN_RE = re.compile(r"\b(\d+)([a-zA-Z]+)\b", re.ASCII)
_SENTENCE_JOIN_RE = re.compile(r"([.!?])([A-Z])")
_CLAUSE_JOIN_RE = re.compile(r"([,;:])([A-Z])")
_WHITESPACE_RE = re.compile(r"\s+")


def split_camel_joins(text: str) -> tuple[str, int]:
    """Split ``wordWord`` joins when both fragments are longer than two characters."""
    count = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal count
        head, upper, tail = match.groups()
        if len(head) > 2 and len(tail) > 2:
            count += 1
            return f"{head} {upper}{tail}"
        return match.group(0)

    return _CAMEL_JOIN_RE.sub(_replace, text), count


def split_digit_word_joins(text: str) -> tuple[str, int]:
    """Split ``5years`` style tokens; short suffixes such as ``3rd`` are left alone."""
    count = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal count
        digits, letters = match.groups()
        if len(letters) > 2:
            count += 1
            return f"{digits} {letters}"
        return match.group(0)

    return _DIGIT_WORD_JOIN_RE.sub(_replace, text), count


def space_after_punctuation(text: str) -> tuple[str, int]:
    """Insert a space after sentence or clause punctuation fused to a capital.

    Returns the repaired text and how many of the two boundary kinds
    (sentence ``.!?`` and clause ``,;:``) changed anything.
    """
    fired = 0
    cleaned = text
    for pattern in (_SENTENCE_JOIN_RE, _CLAUSE_JOIN_RE):
        updated = pattern.sub(r"\1 \2", cleaned)
        if updated != cleaned:
            fired += 1
        cleaned = updated
    return cleaned, fired


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()
