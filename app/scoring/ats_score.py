from __future__ import annotations

import math

from app.core.config.scoring import get_scoring_int
from app.schemas.ats import ATSScoreResult, KeywordMatch, SectionAnalysis

from .keywords import extract_keywords, prepare_job_description_text, prepare_resume_text
from .vocabulary import EXPERIENCE_TERMS, SUMMARY_TERMS, TECHNICAL_TERMS


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _match_vocabulary(vocabulary: tuple[str, ...], resume_lower: str, jd_lower: str) -> KeywordMatch:
    wanted = [term for term in vocabulary if term in jd_lower]
    return KeywordMatch(
        matched=[term for term in wanted if term in resume_lower],
        missing=[term for term in wanted if term not in resume_lower],
    )


def analyze_sections(resume_text: str, job_description_text: str) -> SectionAnalysis:
    """Substring check of the fixed vocabularies; only JD terms are evaluated."""
    resume_lower = resume_text.lower()
    jd_lower = job_description_text.lower()
    return SectionAnalysis(
        skills=_match_vocabulary(TECHNICAL_TERMS, resume_lower, jd_lower),
        experience=_match_vocabulary(EXPERIENCE_TERMS, resume_lower, jd_lower),
        summary=_match_vocabulary(SUMMARY_TERMS, resume_lower, jd_lower),
    )


def calculate_ats_score(resume_text: str, job_description_text: str) -> ATSScoreResult:
    jd_keywords = extract_keywords(prepare_job_description_text(job_description_text))
    resume_keywords = set(extract_keywords(prepare_resume_text(resume_text)))

    matched_keywords = [keyword for keyword in jd_keywords if keyword in resume_keywords]
    missing_keywords = [keyword for keyword in jd_keywords if keyword not in resume_keywords]

    total_keywords = len(jd_keywords)
    matched_count = len(matched_keywords)
    match_percentage = (matched_count / total_keywords) * 100 if total_keywords > 0 else 0.0

    final_score = _round_half_up(match_percentage)
    # Needs both enough JD signal and an absolute match floor, not just a ratio.
    if (
        total_keywords >= get_scoring_int("ats.bonus.min_total_keywords", 10)
        and matched_count >= get_scoring_int("ats.bonus.min_matched_keywords", 5)
    ):
        final_score += get_scoring_int("ats.bonus.points", 10)
    final_score = min(get_scoring_int("ats.max_score", 100), final_score)

    return ATSScoreResult(
        score=final_score,
        matched_keywords=matched_keywords,
        missing_keywords=missing_keywords,
        total_keywords=total_keywords,
        match_percentage=match_percentage,
        analysis=analyze_sections(resume_text, job_description_text),
    )
