from __future__ import annotations

from resume_analyzer.schemas.analysis import CompositeScores, IndustryFit, ResumeSections

_CLOSING = (
    "Focus on adding quantifiable achievements, optimizing for relevant keywords, and ensuring all "
    "sections provide comprehensive information about your professional background."
)


def _overall_clause(score: int) -> str:
    if score >= 8:
        return "indicating an excellent professional presentation that should perform well in competitive job markets."
    if score >= 6:
        return "showing a solid foundation with room for strategic improvements to enhance competitiveness."
    return "suggesting significant opportunities for improvement to meet current industry standards."


def summarize(scores: CompositeScores, sections: ResumeSections, industry_fit: IndustryFit) -> str:
    parts = [f"Your resume receives an overall score of {scores.overall_score}/10, {_overall_clause(scores.overall_score)}"]

    ats_clause = (
        "indicates strong keyword optimization for applicant tracking systems."
        if scores.ats_score >= 7
        else "suggests the need for better keyword integration to pass initial screening filters."
    )
    parts.append(f"Your ATS compatibility score of {scores.ats_score}/10 {ats_clause}")

    parts.append(
        f"The analysis detected a {industry_fit.confidence}% fit for the {industry_fit.detected_industry} industry."
    )
    if industry_fit.confidence >= 70:
        parts.append("Your background aligns well with industry expectations.")
    else:
        parts.append("Consider strengthening industry-specific keywords and relevant experience.")

    strong = [name for name, section in sections.items() if section.score >= 8]
    weak = [name for name, section in sections.items() if section.score < 5]
    if strong:
        parts.append(
            f"Your strongest sections include {', '.join(strong)}, which effectively showcase your qualifications."
        )
    if weak:
        parts.append(f"Priority improvements should focus on {', '.join(weak)} sections.")

    parts.append(_CLOSING)
    return " ".join(parts)
