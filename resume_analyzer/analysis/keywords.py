from __future__ import annotations

from resume_analyzer.core.config.scoring import get_scoring_value
from resume_analyzer.schemas.analysis import KeywordMatching

from .lexicon import INDUSTRY_SUGGESTIONS, JOB_DESCRIPTION_KEYWORDS, PROFESSIONAL_PHRASES, industry_vocabulary


def extract_job_keywords(job_description: str) -> list[str]:
    """Canonical terms mentioned in a job description; anything off the closed list is ignored."""
    lowered = (job_description or "").lower()
    return [keyword for keyword in JOB_DESCRIPTION_KEYWORDS if keyword in lowered]


def _dedupe(values: list[str]) -> list[str]:
    seen: set[str] = set()
    unique: list[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        unique.append(value)
    return unique


def suggest_keywords(industry: str, matched: list[str]) -> list[str]:
    max_suggestions = int(get_scoring_value("keywords.max_suggestions", 8))
    matched_set = set(matched)
    suggestions = [term for term in INDUSTRY_SUGGESTIONS.get(industry, ()) if term not in matched_set]
    suggestions.extend(term for term in PROFESSIONAL_PHRASES if term not in matched_set)
    return suggestions[:max_suggestions]


def match_keywords(text: str, industry: str, job_description: str | None = None) -> KeywordMatching:
    max_missing = int(get_scoring_value("keywords.max_missing", 10))

    candidates = list(industry_vocabulary(industry))
    if job_description:
        candidates.extend(extract_job_keywords(job_description))
    candidates = _dedupe(candidates)

    matched = [keyword for keyword in candidates if keyword.lower() in text]
    missing = [keyword for keyword in candidates if keyword.lower() not in text]

    return KeywordMatching(
        matched=matched,
        missing=missing[:max_missing],
        suggestions=suggest_keywords(industry, matched),
    )
