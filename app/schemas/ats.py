from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.core.config import settings

from .text import CleanTextResult


class KeywordMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)


class SectionAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    skills: KeywordMatch = Field(default_factory=KeywordMatch)
    experience: KeywordMatch = Field(default_factory=KeywordMatch)
    summary: KeywordMatch = Field(default_factory=KeywordMatch)


class ATSScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    total_keywords: int = Field(ge=0)
    match_percentage: float = Field(ge=0.0)
    analysis: SectionAnalysis = Field(default_factory=SectionAnalysis)


class ATSScoreRequest(BaseModel):
    resume_text: str = Field(default="", max_length=settings.max_text_chars)
    job_description_text: str = Field(default="", max_length=settings.max_text_chars)
    clean_resume: bool = True


class ATSScoreResponse(ATSScoreResult):
    resume_cleaning: CleanTextResult | None = None
