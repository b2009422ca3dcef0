from __future__ import annotations

import logging

from app.normalize.text_cleaner import clean_extracted_text, get_cleaning_stats, validate_cleaned_text
from app.schemas.ats import ATSScoreRequest, ATSScoreResponse
from app.schemas.text import (
    CleanTextOptions,
    CleanTextResult,
    TextCleanRequest,
    TextCleanResponse,
    TextQualityReport,
    TextValidateRequest,
)
from app.scoring import calculate_ats_score

logger = logging.getLogger(__name__)


def clean_text_fail_open(text: str, options: CleanTextOptions | None = None) -> CleanTextResult:
    """Clean ``text``; on any failure hand back the original text untouched."""
    try:
        return clean_extracted_text(text, options)
    except Exception as exc:  # noqa: BLE001
        logger.warning("text_cleaning_failed length=%s: %s", len(text), exc)
        return CleanTextResult(
            cleaned_text=text,
            original_length=len(text),
            cleaned_length=len(text),
            issues_fixed=[f"Cleaning skipped: {type(exc).__name__}"],
        )


def run_text_clean(payload: TextCleanRequest) -> TextCleanResponse:
    result = clean_text_fail_open(payload.text, payload.options)
    logger.info(
        "text_cleaned original_length=%s cleaned_length=%s issues=%s",
        result.original_length,
        result.cleaned_length,
        len(result.issues_fixed),
    )
    return TextCleanResponse(
        **result.model_dump(),
        quality=validate_cleaned_text(result.cleaned_text),
        stats=get_cleaning_stats(payload.text, result.cleaned_text),
    )


def run_text_validate(payload: TextValidateRequest) -> TextQualityReport:
    return validate_cleaned_text(payload.text)


def run_ats_score(payload: ATSScoreRequest) -> ATSScoreResponse:
    resume_text = payload.resume_text
    resume_cleaning: CleanTextResult | None = None
    if payload.clean_resume:
        resume_cleaning = clean_text_fail_open(resume_text)
        resume_text = resume_cleaning.cleaned_text

    result = calculate_ats_score(resume_text, payload.job_description_text)
    logger.info(
        "ats_score_computed resume_length=%s jd_length=%s total=%s matched=%s score=%s",
        len(payload.resume_text),
        len(payload.job_description_text),
        result.total_keywords,
        len(result.matched_keywords),
        result.score,
    )
    return ATSScoreResponse(**result.model_dump(), resume_cleaning=resume_cleaning)
