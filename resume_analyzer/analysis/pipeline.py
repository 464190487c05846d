from __future__ import annotations

import logging
import random

from resume_analyzer.core.config.scoring import get_scoring_value
from resume_analyzer.schemas.analysis import ResumeAnalysis

from .aggregate import aggregate
from .benchmark import benchmark
from .highlights import generate_improvements, generate_strengths
from .industry import analyze_industry_fit, resolve_industry
from .keywords import match_keywords
from .narrative import summarize
from .recommendations import generate_recommendations
from .sections import analyze_sections

logger = logging.getLogger(__name__)


def analyze(
    resume_text: str,
    job_description: str | None = None,
    target_industry: str | None = None,
    *,
    rng: random.Random | None = None,
) -> ResumeAnalysis:
    """Run the full heuristic analysis over plain resume text.

    Input is not validated here; any string (including "") yields a complete
    result. Only ``competitor_comparison.similar_profiles`` varies between
    calls with the same input, unless a seeded ``rng`` is supplied.
    """
    text = resume_text or ""
    normalized = text.lower()

    override = target_industry if target_industry and target_industry.strip() else None
    industry = resolve_industry(normalized, override)
    sections = analyze_sections(normalized)
    scores = aggregate(sections, text, industry)

    keyword_matching = match_keywords(normalized, industry, job_description)
    industry_fit = analyze_industry_fit(normalized, industry)
    max_missing_skills = int(get_scoring_value("keywords.max_missing_skills", 5))

    analysis = ResumeAnalysis(
        overall_score=scores.overall_score,
        ats_score=scores.ats_score,
        readability_score=scores.readability_score,
        keyword_density=scores.keyword_density,
        strengths=generate_strengths(text, sections),
        improvements=generate_improvements(text, sections),
        missing_skills=keyword_matching.missing[:max_missing_skills],
        keyword_matching=keyword_matching,
        sections=sections,
        industry_fit=industry_fit,
        competitor_comparison=benchmark(scores.overall_score, rng=rng),
        summary=summarize(scores, sections, industry_fit),
        recommendations=generate_recommendations(text, sections, scores),
    )
    logger.debug(
        "resume_analysis_completed industry=%s overall=%s ats=%s readability=%s density=%s recommendations=%s",
        industry,
        scores.overall_score,
        scores.ats_score,
        scores.readability_score,
        scores.keyword_density,
        len(analysis.recommendations),
    )
    return analysis
