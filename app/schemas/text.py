from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.core.config import settings


class CleanTextOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    preserve_formatting: bool = True
    aggressive_cleaning: bool = True
    remove_special_chars: bool = False
    fix_common_issues: bool = True


class CleanTextResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    cleaned_text: str
    original_length: int = Field(ge=0)
    cleaned_length: int = Field(ge=0)
    issues_fixed: list[str] = Field(default_factory=list)


class TextQualityReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    issues: list[str] = Field(default_factory=list)
    quality_score: int = Field(ge=0, le=100)


class CleaningStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    original_length: int = Field(ge=0)
    cleaned_length: int = Field(ge=0)
    reduction_percentage: float
    whitespace_reduction: float
    special_char_reduction: float


class TextCleanRequest(BaseModel):
    text: str = Field(default="", max_length=settings.max_text_chars)
    options: CleanTextOptions = Field(default_factory=CleanTextOptions)


class TextCleanResponse(CleanTextResult):
    quality: TextQualityReport
    stats: CleaningStats


class TextValidateRequest(BaseModel):
    text: str = Field(default="", max_length=settings.max_text_chars)
