from .ats_score import analyze_sections, calculate_ats_score
from .keywords import (
    apply_compound_rewrites,
    extract_keywords,
    prepare_job_description_text,
    prepare_resume_text,
)

__all__ = [
    "analyze_sections",
    "calculate_ats_score",
    "apply_compound_rewrites",
    "extract_keywords",
    "prepare_job_description_text",
    "prepare_resume_text",
]
