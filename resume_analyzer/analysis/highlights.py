from __future__ import annotations

from resume_analyzer.core.config.scoring import get_scoring_value
from resume_analyzer.schemas.analysis import ResumeSections

_DEFAULT_STRENGTHS = (
    "Professional presentation and formatting",
    "Clear communication of qualifications",
    "Relevant industry experience highlighted",
    "Strong technical skill set demonstrated",
    "Professional development and growth shown",
)

_DEFAULT_IMPROVEMENTS = (
    "Optimize with more industry-specific keywords",
    "Use stronger action verbs to describe accomplishments",
    "Include a professional summary at the top",
    "Add more context about company size and industry",
    "Highlight transferable skills for career changes",
)


def _bounded(items: list[str], defaults: tuple[str, ...]) -> list[str]:
    min_items = int(get_scoring_value("highlights.min_items", 3))
    max_items = int(get_scoring_value("highlights.max_items", 5))
    while len(items) < min_items:
        items.append(defaults[len(items) % len(defaults)])
    return items[:max_items]


def generate_strengths(text: str, sections: ResumeSections) -> list[str]:
    lowered = text.lower()
    strong_score = float(get_scoring_value("highlights.strong_section_score", 8))
    strengths: list[str] = []

    for name, section in sections.items():
        if section.score >= strong_score:
            strengths.append(f"Excellent {name} section with comprehensive information")

    if "%" in lowered or "increased" in lowered or "improved" in lowered:
        strengths.append("Quantified achievements with measurable results")
    if "led" in lowered or "managed" in lowered or "supervised" in lowered:
        strengths.append("Demonstrates leadership and management experience")
    if "project" in lowered and "team" in lowered:
        strengths.append("Shows collaborative project experience")
    if len(text) > int(get_scoring_value("highlights.detailed_length", 1500)):
        strengths.append("Comprehensive and detailed professional presentation")
    if "certification" in lowered or "certified" in lowered:
        strengths.append("Professional certifications enhance credibility")

    return _bounded(strengths, _DEFAULT_STRENGTHS)


def generate_improvements(text: str, sections: ResumeSections) -> list[str]:
    lowered = text.lower()
    weak_score = float(get_scoring_value("highlights.weak_section_score", 6))
    improvements: list[str] = []

    for _, section in sections.items():
        if section.score < weak_score and section.improvements:
            improvements.append(section.improvements[0])

    if "%" not in lowered and "increased" not in lowered and "reduced" not in lowered:
        improvements.append("Add quantifiable achievements with specific metrics and percentages")
    if "award" not in lowered and "recognition" not in lowered and "achievement" not in lowered:
        improvements.append("Include notable awards, recognitions, or achievements")
    if len(text) < int(get_scoring_value("recommendations.min_characters", 1000)):
        improvements.append("Expand content with more detailed descriptions and examples")
    if "volunteer" not in lowered and "community" not in lowered:
        improvements.append("Consider adding volunteer work or community involvement")
    if "http" not in lowered and "github" not in lowered and "portfolio" not in lowered:
        improvements.append("Add portfolio links or professional online presence")

    return _bounded(improvements, _DEFAULT_IMPROVEMENTS)
