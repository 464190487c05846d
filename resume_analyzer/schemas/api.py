from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from .analysis import CamelModel, ResumeAnalysis


class AnalyzeRequest(CamelModel):
    resume_text: str = ""
    job_description: str | None = Field(default=None, max_length=50000)
    target_industry: str | None = Field(default=None, max_length=100)

    @field_validator("target_industry")
    @classmethod
    def _blank_industry_is_absent(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value if value.strip() else None


class AnalyzeResponse(CamelModel):
    success: Literal[True] = True
    analysis: ResumeAnalysis
    id: str
    provider: str
    version: str


class HistoryIndustryFit(CamelModel):
    detected_industry: str
    confidence: int = Field(ge=0, le=100)


class HistoryComparison(CamelModel):
    percentile: int = Field(ge=0, le=100)
    benchmark: str


class ResumeHistoryItem(CamelModel):
    id: str
    overall_score: int
    ats_score: int
    readability_score: int
    keyword_density: int
    industry_fit: HistoryIndustryFit
    competitor_comparison: HistoryComparison
    created_at: datetime
    preview: str
    version: str | None = None


class HistoryResponse(CamelModel):
    success: Literal[True] = True
    analyses: list[ResumeHistoryItem]
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    limit: int = Field(ge=1)
