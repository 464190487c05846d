from __future__ import annotations

from collections.abc import Iterator
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

RecommendationType = Literal["critical", "important", "nice-to-have"]
Impact = Literal["high", "medium", "low"]

SECTION_NAMES: tuple[str, ...] = ("contact", "summary", "experience", "education", "skills", "projects")


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SectionAssessment(CamelModel):
    present: bool
    score: float = Field(ge=0.0, le=10.0)
    feedback: str
    improvements: list[str] = Field(default_factory=list)


class ResumeSections(CamelModel):
    contact: SectionAssessment
    summary: SectionAssessment
    experience: SectionAssessment
    education: SectionAssessment
    skills: SectionAssessment
    projects: SectionAssessment

    def items(self) -> Iterator[tuple[str, SectionAssessment]]:
        for name in SECTION_NAMES:
            yield name, getattr(self, name)

    def scores(self) -> list[float]:
        return [section.score for _, section in self.items()]


class CompositeScores(CamelModel):
    overall_score: int = Field(ge=0, le=10)
    ats_score: int = Field(ge=0, le=10)
    readability_score: int = Field(ge=1, le=10)
    keyword_density: int = Field(ge=0, le=100)


class IndustryFit(CamelModel):
    detected_industry: str
    confidence: int = Field(ge=0, le=100)
    suggestions: list[str] = Field(default_factory=list)


class KeywordMatching(CamelModel):
    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class Recommendation(CamelModel):
    type: RecommendationType
    title: str
    description: str
    impact: Impact
    category: str


class CompetitorComparison(CamelModel):
    percentile: int = Field(ge=0, le=100)
    similar_profiles: int = Field(ge=0)
    benchmark: str


class ResumeAnalysis(CamelModel):
    overall_score: int = Field(ge=0, le=10)
    ats_score: int = Field(ge=0, le=10)
    readability_score: int = Field(ge=1, le=10)
    keyword_density: int = Field(ge=0, le=100)
    strengths: list[str]
    improvements: list[str]
    missing_skills: list[str]
    keyword_matching: KeywordMatching
    sections: ResumeSections
    industry_fit: IndustryFit
    competitor_comparison: CompetitorComparison
    summary: str
    recommendations: list[Recommendation]

    @property
    def scores(self) -> CompositeScores:
        return CompositeScores(
            overall_score=self.overall_score,
            ats_score=self.ats_score,
            readability_score=self.readability_score,
            keyword_density=self.keyword_density,
        )
