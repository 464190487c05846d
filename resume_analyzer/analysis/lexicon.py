from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

GENERAL_INDUSTRY = "general"

# Table order matters: industry detection keeps the first industry on ties.
INDUSTRY_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "software": ("javascript", "python", "react", "node", "aws", "docker", "git", "api", "database"),
        "marketing": ("seo", "analytics", "campaign", "social media", "content", "brand", "conversion"),
        "finance": ("excel", "financial modeling", "analysis", "risk", "bloomberg", "trading", "compliance"),
        "design": ("figma", "adobe", "ui/ux", "typography", "branding", "prototype", "user research"),
        "sales": ("crm", "pipeline", "quotas", "b2b", "negotiation", "relationship", "revenue"),
    }
)

ATS_KEYWORDS: tuple[str, ...] = (
    "experience",
    "skills",
    "education",
    "achievements",
    "responsibilities",
    "managed",
    "developed",
    "implemented",
    "created",
    "improved",
    "increased",
    "reduced",
    "led",
    "collaborated",
    "analyzed",
    "designed",
)

# Closed vocabulary: only these terms can be picked up from a job description.
JOB_DESCRIPTION_KEYWORDS: tuple[str, ...] = (
    # technical
    "javascript",
    "python",
    "react",
    "node",
    "sql",
    "aws",
    "docker",
    "kubernetes",
    "git",
    "api",
    "database",
    "mongodb",
    "postgresql",
    "redis",
    "elasticsearch",
    # soft skills
    "leadership",
    "communication",
    "teamwork",
    "problem-solving",
    "analytical",
    "project management",
    "agile",
    "scrum",
    "collaboration",
    "mentoring",
    # business
    "strategy",
    "analysis",
    "reporting",
    "optimization",
    "automation",
    "testing",
    "deployment",
    "monitoring",
    "security",
    "performance",
    "scalability",
)

INDUSTRY_SUGGESTIONS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "software": ("microservices", "ci/cd", "testing", "debugging", "code review"),
        "marketing": ("a/b testing", "customer acquisition", "retention", "roi", "kpi"),
        "finance": ("forecasting", "budgeting", "valuation", "portfolio management", "derivatives"),
        "design": ("wireframing", "user testing", "accessibility", "design systems", "prototyping"),
        "sales": ("lead generation", "customer success", "account management", "forecasting", "closing"),
    }
)

PROFESSIONAL_PHRASES: tuple[str, ...] = (
    "results-driven",
    "cross-functional",
    "stakeholder management",
    "process improvement",
    "data-driven",
    "innovative",
    "strategic thinking",
    "customer-focused",
)


def industry_vocabulary(industry: str) -> tuple[str, ...]:
    """Keywords for an industry; unknown industries have an empty vocabulary."""
    return INDUSTRY_KEYWORDS.get(industry, ())


def count_hits(text: str, vocabulary: tuple[str, ...]) -> int:
    return sum(1 for keyword in vocabulary if keyword in text)
