"""Repair text produced by PDF/DOCX extraction before it is scored.

Every stage takes a string and returns ``(text, entries)`` where ``entries`` are
human-readable labels for what the stage changed. ``clean_extracted_text``
runs the stages in a fixed order and concatenates the labels into the
cleaning report. Nothing here raises on string input.
"""

from __future__ import annotations

import re

from app.core.config.scoring import get_scoring_float, get_scoring_int
from app.schemas.text import CleaningStats, CleanTextOptions, CleanTextResult, TextQualityReport

from .utils import space_after_punctuation, split_camel_joins, split_digit_word_joins

_SPECIFIC_FIXES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bacollaborative\b", re.ASCII), "a collaborative"),
    (re.compile(r"\balgorithmbased\b", re.ASCII), "algorithm based"),
    (re.compile(r"\bonuser\b", re.ASCII), "on user"),
    (re.compile(r"\bsimilarityto\b", re.ASCII), "similarity to"),
    (re.compile(r"\bgenerate(\d+)\b", re.ASCII), r"generate \1"),
)

_LONG_WHITESPACE_RE = re.compile(r"\s{3,}")
_TRIPLE_NEWLINE_RE = re.compile(r"\n\s*\n\s*\n")
_TABS_RE = re.compile(r"\t+")
_ANY_WHITESPACE_RE = re.compile(r"\s+")

_SECTION_HEADINGS: dict[str, tuple[str, ...]] = {
    "SUMMARY": ("professional summary", "career summary", "career objective", "summary", "profile", "objective", "about me"),
    "EXPERIENCE": (
        "professional experience",
        "work experience",
        "employment history",
        "career history",
        "work history",
        "experience",
        "employment",
    ),
    "EDUCATION": ("academic background", "education", "academics", "academic"),
    "SKILLS": ("technical skills", "core competencies", "core skills", "key skills", "skills"),
    "PROJECTS": ("personal projects", "projects", "portfolio"),
    "CERTIFICATIONS": ("licenses and certifications", "certifications", "certificates"),
    "AWARDS": ("accomplishments", "achievements", "awards", "honors"),
    "LANGUAGES": ("language skills", "languages"),
    "REFERENCES": ("references", "reference"),
}
_HEADING_LOOKUP = {
    synonym: canonical for canonical, synonyms in _SECTION_HEADINGS.items() for synonym in synonyms
}
_HEADING_LINE_RE = re.compile(
    r"^[ \t]*("
    + "|".join(re.escape(item) for item in sorted(_HEADING_LOOKUP, key=len, reverse=True))
    + r")[ \t]*:?[ \t]*$",
    re.IGNORECASE | re.MULTILINE | re.ASCII,
)
# URLs, C++ and snake_case keep their doubled characters.
_REPEATED_PUNCTUATION_RE = re.compile(r"([.!?,;:*~|#-])\1+")

_DISALLOWED_CHARS_RE = re.compile(r"""[^A-Za-z0-9_\s\-.,!?;:()"'&@#$%]""")
_NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")

_SPECIAL_CHAR_RE = re.compile(r"[^A-Za-z0-9_\s]")
_WHITESPACE_CHAR_RE = re.compile(r"\s")
_ARTIFACT_PATTERNS = (
    re.compile(r"\b\w+\d+\w+\b", re.ASCII),
    re.compile(r"\b[a-z]+[A-Z][a-z]+\b", re.ASCII),
    re.compile(r"\s{3,}"),
    re.compile(r"\n{3,}"),
)
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def fix_common_pdf_issues(text: str) -> tuple[str, list[str]]:
    entries: list[str] = []
    cleaned = text

    fix_count = 0
    for pattern, replacement in _SPECIFIC_FIXES:
        updated = pattern.sub(replacement, cleaned)
        if updated != cleaned:
            fix_count += 1
        cleaned = updated
    if fix_count > 0:
        entries.append(f"Fixed {fix_count} specific PDF parsing issues")

    cleaned, camel_count = split_camel_joins(cleaned)
    if camel_count > 0:
        entries.append(f"Split {camel_count} joined lowercase/uppercase words")

    cleaned, digit_count = split_digit_word_joins(cleaned)
    if digit_count > 0:
        entries.append(f"Split {digit_count} joined number/word tokens")

    return cleaned, entries


def clean_whitespace(text: str, preserve_formatting: bool = True) -> tuple[str, list[str]]:
    cleaned = _LONG_WHITESPACE_RE.sub(" ", text)
    cleaned = _TRIPLE_NEWLINE_RE.sub("\n\n", cleaned)
    cleaned = _TABS_RE.sub(" ", cleaned)
    cleaned = cleaned.replace("\r\n", "\n").replace("\r", "\n")
    if not preserve_formatting:
        cleaned = _ANY_WHITESPACE_RE.sub(" ", cleaned)
    cleaned = cleaned.strip()

    if len(cleaned) != len(text):
        return cleaned, ["Cleaned excessive whitespace"]
    return cleaned, []


def fix_word_boundaries(text: str) -> tuple[str, list[str]]:
    cleaned, fired = space_after_punctuation(text)
    if fired > 0:
        return cleaned, [f"Fixed {fired} word boundary issues"]
    return cleaned, []


def normalize_text_structure(text: str) -> tuple[str, list[str]]:
    entries: list[str] = []
    heading_count = 0

    def _canonical_heading(match: re.Match[str]) -> str:
        nonlocal heading_count
        canonical = _HEADING_LOOKUP.get(match.group(1).lower())
        if canonical is None:
            return match.group(0)
        if match.group(0) != canonical:
            heading_count += 1
        return canonical

    cleaned = _HEADING_LINE_RE.sub(_canonical_heading, text)
    if heading_count > 0:
        entries.append(f"Normalized {heading_count} resume section headings")

    run_count = len(_REPEATED_PUNCTUATION_RE.findall(cleaned))
    if run_count > 0:
        cleaned = _REPEATED_PUNCTUATION_RE.sub(r"\1", cleaned)
        entries.append(f"Collapsed {run_count} repeated punctuation runs")

    return cleaned, entries


def remove_special_characters(text: str) -> tuple[str, list[str]]:
    entries: list[str] = []
    steps = (
        (_DISALLOWED_CHARS_RE, "Removed characters outside the allowed punctuation set"),
        (_NON_ASCII_RE, "Removed non-ASCII characters"),
        (_ANY_WHITESPACE_RE, "Collapsed whitespace left by removed characters"),
    )
    cleaned = text
    for pattern, label in steps:
        updated = pattern.sub(" ", cleaned)
        if updated != cleaned:
            entries.append(label)
        cleaned = updated
    return cleaned, entries


def final_cleanup(text: str) -> tuple[str, list[str]]:
    cleaned = _TRIPLE_NEWLINE_RE.sub("\n\n", text.strip()).strip()
    return cleaned, ["Applied final cleanup"]


def clean_extracted_text(text: str, options: CleanTextOptions | None = None) -> CleanTextResult:
    """Run the cleaning pipeline and return the cleaned text with its report."""
    opts = options or CleanTextOptions()
    issues_fixed: list[str] = []
    cleaned = text

    if opts.fix_common_issues:
        cleaned, entries = fix_common_pdf_issues(cleaned)
        issues_fixed.extend(entries)

    cleaned, entries = clean_whitespace(cleaned, preserve_formatting=opts.preserve_formatting)
    issues_fixed.extend(entries)

    cleaned, entries = fix_word_boundaries(cleaned)
    issues_fixed.extend(entries)

    if opts.aggressive_cleaning:
        cleaned, entries = normalize_text_structure(cleaned)
        issues_fixed.extend(entries)

    if opts.remove_special_chars:
        cleaned, entries = remove_special_characters(cleaned)
        issues_fixed.extend(entries)

    cleaned, entries = final_cleanup(cleaned)
    issues_fixed.extend(entries)

    return CleanTextResult(
        cleaned_text=cleaned,
        original_length=len(text),
        cleaned_length=len(cleaned),
        issues_fixed=issues_fixed,
    )


def _ratio(count: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return count / total


def validate_cleaned_text(text: str) -> TextQualityReport:
    """Advisory quality gate over already-cleaned text."""
    issues: list[str] = []
    quality_score = 100
    length = len(text)

    min_chars = get_scoring_int("text_quality.length.min_chars", 50)
    max_chars = get_scoring_int("text_quality.length.max_chars", 10000)
    too_short = length < min_chars
    if too_short:
        issues.append(f"Text too short ({length} characters, expected at least {min_chars})")
        quality_score -= get_scoring_int("text_quality.length.too_short_penalty", 30)
    if length > max_chars:
        issues.append(f"Text too long ({length} characters, expected at most {max_chars})")
        quality_score -= get_scoring_int("text_quality.length.too_long_penalty", 10)

    special_ratio = _ratio(len(_SPECIAL_CHAR_RE.findall(text)), length)
    if special_ratio > get_scoring_float("text_quality.special_chars.max_ratio", 0.1):
        issues.append("Too many special characters")
        quality_score -= get_scoring_int("text_quality.special_chars.penalty", 20)

    whitespace_ratio = _ratio(len(_WHITESPACE_CHAR_RE.findall(text)), length)
    if whitespace_ratio > get_scoring_float("text_quality.whitespace.max_ratio", 0.3):
        issues.append("Too much whitespace")
        quality_score -= get_scoring_int("text_quality.whitespace.penalty", 15)

    artifact_count = sum(len(pattern.findall(text)) for pattern in _ARTIFACT_PATTERNS)
    if artifact_count > get_scoring_int("text_quality.artifacts.max_count", 10):
        issues.append("Multiple PDF parsing artifacts detected")
        quality_score -= get_scoring_int("text_quality.artifacts.penalty", 25)

    sentences = [part for part in _SENTENCE_SPLIT_RE.split(text) if part.strip()]
    if sentences:
        avg_sentence_length = sum(len(part) for part in sentences) / len(sentences)
        if avg_sentence_length < get_scoring_int("text_quality.sentences.min_avg_chars", 10):
            issues.append("Sentences too short")
            quality_score -= get_scoring_int("text_quality.sentences.too_short_penalty", 10)
        if avg_sentence_length > get_scoring_int("text_quality.sentences.max_avg_chars", 200):
            issues.append("Sentences too long")
            quality_score -= get_scoring_int("text_quality.sentences.too_long_penalty", 10)

    quality_score = max(0, quality_score)
    # Below the minimum length the text is rejected even when the score reaches the threshold.
    return TextQualityReport(
        is_valid=not too_short and quality_score >= get_scoring_int("text_quality.valid_threshold", 70),
        issues=issues,
        quality_score=quality_score,
    )


def get_cleaning_stats(original: str, cleaned: str) -> CleaningStats:
    original_length = len(original)
    cleaned_length = len(cleaned)

    original_whitespace = len(_WHITESPACE_CHAR_RE.findall(original))
    cleaned_whitespace = len(_WHITESPACE_CHAR_RE.findall(cleaned))
    original_special = len(_SPECIAL_CHAR_RE.findall(original))
    cleaned_special = len(_SPECIAL_CHAR_RE.findall(cleaned))

    return CleaningStats(
        original_length=original_length,
        cleaned_length=cleaned_length,
        reduction_percentage=_ratio(original_length - cleaned_length, original_length) * 100,
        whitespace_reduction=_ratio(original_whitespace - cleaned_whitespace, original_whitespace) * 100,
        special_char_reduction=_ratio(original_special - cleaned_special, original_special) * 100,
    )
