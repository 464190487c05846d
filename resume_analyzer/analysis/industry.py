from __future__ import annotations

from resume_analyzer.core.config.scoring import get_scoring_value
from resume_analyzer.schemas.analysis import IndustryFit

from .lexicon import GENERAL_INDUSTRY, INDUSTRY_KEYWORDS, count_hits, industry_vocabulary
from .numbers import percentage


def _industry_scores(text: str) -> dict[str, int]:
    return {industry: count_hits(text, keywords) for industry, keywords in INDUSTRY_KEYWORDS.items()}


def detect_industry(text: str) -> str:
    best_industry = GENERAL_INDUSTRY
    best_score = 0
    for industry, score in _industry_scores(text).items():
        if score > best_score:
            best_industry = industry
            best_score = score
    return best_industry


def resolve_industry(text: str, target_industry: str | None = None) -> str:
    """Caller-supplied industries are trusted verbatim; otherwise detect one."""
    if target_industry:
        return target_industry
    return detect_industry(text)


def analyze_industry_fit(text: str, industry: str) -> IndustryFit:
    vocabulary = industry_vocabulary(industry)
    confidence = percentage(count_hits(text, vocabulary), len(vocabulary))

    low_confidence = int(get_scoring_value("industry_fit.low_confidence_threshold", 50))
    mismatch = int(get_scoring_value("industry_fit.mismatch_threshold", 30))

    suggestions: list[str] = []
    if confidence < low_confidence:
        suggestions.append(f"Add more {industry}-specific keywords and terminology")
        suggestions.append(f"Include relevant tools and technologies used in {industry}")
        suggestions.append(f"Highlight {industry} industry experience and projects")
    if confidence < mismatch:
        suggestions.append("Consider targeting a different industry that better matches your background")

    return IndustryFit(detected_industry=industry, confidence=confidence, suggestions=suggestions)
