from .aggregate import aggregate
from .benchmark import benchmark
from .highlights import generate_improvements, generate_strengths
from .industry import analyze_industry_fit, detect_industry, resolve_industry
from .keywords import extract_job_keywords, match_keywords
from .narrative import summarize
from .pipeline import analyze
from .recommendations import generate_recommendations
from .sections import (
    analyze_contact,
    analyze_education,
    analyze_experience,
    analyze_projects,
    analyze_sections,
    analyze_skills,
    analyze_summary,
)

__all__ = [
    "analyze",
    "analyze_sections",
    "analyze_contact",
    "analyze_summary",
    "analyze_experience",
    "analyze_education",
    "analyze_skills",
    "analyze_projects",
    "detect_industry",
    "resolve_industry",
    "analyze_industry_fit",
    "aggregate",
    "match_keywords",
    "extract_job_keywords",
    "generate_recommendations",
    "generate_strengths",
    "generate_improvements",
    "summarize",
    "benchmark",
]
