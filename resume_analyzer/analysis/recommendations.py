from __future__ import annotations

from resume_analyzer.core.config.scoring import get_scoring_value
from resume_analyzer.schemas.analysis import CompositeScores, Recommendation, ResumeSections

_IMPACT_RANK = {"low": 0, "medium": 1, "high": 2}


def _section_title(name: str) -> str:
    return name[:1].upper() + name[1:]


def _cap(recommendations: list[Recommendation], max_items: int) -> list[Recommendation]:
    """Keep at most ``max_items`` in rule order.

    Overflow is shed from the lowest impact band first, latest rule first.
    A plain first-N cut would drop "Expand Resume Content" for an empty
    resume, which must report both it and "Resume Needs Major Improvements".
    """
    if len(recommendations) <= max_items:
        return list(recommendations)

    ranked = sorted(
        range(len(recommendations)),
        key=lambda index: (-_IMPACT_RANK[recommendations[index].impact], index),
    )
    keep = set(ranked[:max_items])
    return [item for index, item in enumerate(recommendations) if index in keep]


def generate_recommendations(
    text: str,
    sections: ResumeSections,
    scores: CompositeScores,
) -> list[Recommendation]:
    recommendations: list[Recommendation] = []

    if scores.overall_score < int(get_scoring_value("recommendations.overall_below", 6)):
        recommendations.append(
            Recommendation(
                type="critical",
                title="Resume Needs Major Improvements",
                description=(
                    "Your resume score is below average. Focus on strengthening core sections "
                    "and adding more relevant content."
                ),
                impact="high",
                category="Overall Quality",
            )
        )

    if scores.ats_score < int(get_scoring_value("recommendations.ats_below", 5)):
        recommendations.append(
            Recommendation(
                type="critical",
                title="Poor ATS Compatibility",
                description=(
                    "Your resume may not pass Applicant Tracking Systems. "
                    "Add more industry keywords and action verbs."
                ),
                impact="high",
                category="ATS Optimization",
            )
        )

    section_below = float(get_scoring_value("recommendations.section_below", 5))
    for name, section in sections.items():
        if not section.present:
            recommendations.append(
                Recommendation(
                    type="important",
                    title=f"Missing {_section_title(name)} Section",
                    description=f"Add a {name} section to provide comprehensive information about your background.",
                    impact="medium",
                    category="Content Structure",
                )
            )
        elif section.score < section_below:
            description = (
                section.improvements[0]
                if section.improvements
                else f"Enhance your {name} section with more detailed information."
            )
            recommendations.append(
                Recommendation(
                    type="important",
                    title=f"Improve {_section_title(name)} Section",
                    description=description,
                    impact="medium",
                    category="Content Quality",
                )
            )

    if scores.keyword_density < int(get_scoring_value("recommendations.keyword_density_below", 30)):
        recommendations.append(
            Recommendation(
                type="important",
                title="Low Keyword Density",
                description="Include more industry-specific keywords to improve relevance and searchability.",
                impact="medium",
                category="SEO & Keywords",
            )
        )

    if scores.readability_score < int(get_scoring_value("recommendations.readability_below", 6)):
        recommendations.append(
            Recommendation(
                type="nice-to-have",
                title="Improve Readability",
                description="Use shorter sentences and simpler language to improve readability.",
                impact="low",
                category="Writing Style",
            )
        )

    lowered = text.lower()
    if "http" not in lowered and "portfolio" not in lowered:
        recommendations.append(
            Recommendation(
                type="nice-to-have",
                title="Add Portfolio Links",
                description="Include links to your portfolio, GitHub, or professional profiles.",
                impact="medium",
                category="Professional Presence",
            )
        )

    if len(text) < int(get_scoring_value("recommendations.min_characters", 1000)):
        recommendations.append(
            Recommendation(
                type="important",
                title="Expand Resume Content",
                description=(
                    "Your resume is quite short. Add more details about your experience and achievements."
                ),
                impact="high",
                category="Content Length",
            )
        )

    return _cap(recommendations, int(get_scoring_value("recommendations.max_items", 8)))
