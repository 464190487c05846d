"""Per-section heuristics over normalized (lower-cased) resume text.

Each section runs a fixed list of boolean probes. The score is the share of
probes that hit scaled to 10, presence comes from the section's fundamental
probes only, and every failing probe contributes one improvement in
declaration order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from resume_analyzer.schemas.analysis import ResumeSections, SectionAssessment

_EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")
_PHONE_RE = re.compile(r"(?:\+?1[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}")
_YEAR_RE = re.compile(r"\d{4}")


def _contains_any(*needles: str) -> Callable[[str], bool]:
    def probe(text: str) -> bool:
        return any(needle in text for needle in needles)

    return probe


def _matches(pattern: re.Pattern[str]) -> Callable[[str], bool]:
    def probe(text: str) -> bool:
        return pattern.search(text) is not None

    return probe


def _has_dates(text: str) -> bool:
    return _YEAR_RE.search(text) is not None or "present" in text or "current" in text


def _has_graduation_year(text: str) -> bool:
    return _YEAR_RE.search(text) is not None and ("graduated" in text or "degree" in text)


@dataclass(frozen=True)
class _Probe:
    name: str
    check: Callable[[str], bool]
    improvement: str


@dataclass(frozen=True)
class _SectionRules:
    probes: tuple[_Probe, ...]
    presence: frozenset[str]
    feedback_threshold: float
    good_feedback: str
    weak_feedback: str


_CONTACT = _SectionRules(
    probes=(
        _Probe("email", _matches(_EMAIL_RE), "Add professional email address"),
        _Probe("phone", _matches(_PHONE_RE), "Include phone number"),
        _Probe("linkedin", _contains_any("linkedin"), "Add LinkedIn profile URL"),
        _Probe("location", _contains_any("city", "state"), "Include location (city, state)"),
    ),
    presence=frozenset({"email", "phone"}),
    feedback_threshold=7,
    good_feedback="Contact information is comprehensive",
    weak_feedback="Contact section needs improvement",
)

_SUMMARY = _SectionRules(
    probes=(
        _Probe(
            "heading",
            _contains_any("summary", "objective", "profile"),
            "Add a professional summary or objective statement",
        ),
        _Probe(
            "career_goal",
            _contains_any("seeking", "looking", "passionate"),
            "Include clear career goals and aspirations",
        ),
        _Probe(
            "key_skills",
            _contains_any("experienced", "skilled", "proficient"),
            "Highlight key skills and expertise in summary",
        ),
    ),
    presence=frozenset({"heading"}),
    feedback_threshold=7,
    good_feedback="Professional summary is well-crafted",
    weak_feedback="Consider adding a compelling professional summary",
)

_EXPERIENCE = _SectionRules(
    probes=(
        _Probe("work", _contains_any("experience", "work", "employment"), "Add work experience section"),
        _Probe(
            "job_titles",
            _contains_any("manager", "developer", "analyst", "coordinator"),
            "Include specific job titles and roles",
        ),
        _Probe("companies", _contains_any("company", "inc", "corp", "ltd"), "Add company names and details"),
        _Probe("dates", _has_dates, "Include employment dates"),
        _Probe(
            "achievements",
            _contains_any("achieved", "improved", "increased", "%"),
            "Add quantifiable achievements and results",
        ),
    ),
    presence=frozenset({"work"}),
    feedback_threshold=8,
    good_feedback="Work experience section is comprehensive",
    weak_feedback="Work experience needs more detail",
)

_EDUCATION = _SectionRules(
    probes=(
        _Probe(
            "education",
            _contains_any("education", "degree", "university", "college"),
            "Add education section",
        ),
        _Probe(
            "degree",
            _contains_any("bachelor", "master", "phd", "diploma"),
            "Specify degree type and field of study",
        ),
        _Probe("institution", _contains_any("university", "college", "institute"), "Include institution names"),
        _Probe("graduation_year", _has_graduation_year, "Add graduation dates"),
        _Probe(
            "grades",
            _contains_any("gpa", "grade", "honors"),
            "Consider adding GPA if above 3.5 or relevant honors",
        ),
    ),
    presence=frozenset({"education"}),
    feedback_threshold=6,
    good_feedback="Education section is well-documented",
    weak_feedback="Education section could be more detailed",
)

_SKILLS = _SectionRules(
    probes=(
        _Probe(
            "heading",
            _contains_any("skills", "competencies", "proficiencies"),
            "Add a dedicated skills section",
        ),
        _Probe(
            "technical",
            _contains_any("programming", "software", "technical"),
            "Include relevant technical skills",
        ),
        _Probe("soft", _contains_any("communication", "leadership", "teamwork"), "Add important soft skills"),
        _Probe(
            "tools",
            _contains_any("microsoft", "adobe", "google", "salesforce"),
            "List software tools and platforms you know",
        ),
        _Probe(
            "languages",
            _contains_any("language", "spanish", "french", "bilingual"),
            "Include language proficiencies if applicable",
        ),
    ),
    presence=frozenset({"heading"}),
    feedback_threshold=6,
    good_feedback="Skills section showcases diverse competencies",
    weak_feedback="Skills section needs expansion",
)

_PROJECTS = _SectionRules(
    probes=(
        _Probe(
            "heading",
            _contains_any("project", "portfolio", "personal work"),
            "Add a projects section to showcase your work",
        ),
        _Probe(
            "titles",
            _contains_any("built", "developed", "created"),
            "Include specific project names and descriptions",
        ),
        _Probe(
            "technologies",
            _contains_any("using", "with", "technologies"),
            "List technologies and tools used in projects",
        ),
        _Probe("results", _contains_any("result", "outcome", "impact"), "Describe project outcomes and impact"),
        _Probe(
            "links",
            _contains_any("github", "demo", "live", "http"),
            "Add links to GitHub repos or live demos",
        ),
    ),
    presence=frozenset({"heading"}),
    feedback_threshold=6,
    good_feedback="Projects section demonstrates practical experience",
    weak_feedback="Consider adding relevant projects",
)


def _assess(text: str, rules: _SectionRules) -> SectionAssessment:
    results = [(probe, probe.check(text)) for probe in rules.probes]
    hits = sum(1 for _, passed in results if passed)
    score = round(min(hits * 10 / len(rules.probes), 10.0), 2)
    return SectionAssessment(
        present=any(passed for probe, passed in results if probe.name in rules.presence),
        score=score,
        feedback=rules.good_feedback if score >= rules.feedback_threshold else rules.weak_feedback,
        improvements=[probe.improvement for probe, passed in results if not passed],
    )


def analyze_contact(text: str) -> SectionAssessment:
    return _assess(text, _CONTACT)


def analyze_summary(text: str) -> SectionAssessment:
    return _assess(text, _SUMMARY)


def analyze_experience(text: str) -> SectionAssessment:
    return _assess(text, _EXPERIENCE)


def analyze_education(text: str) -> SectionAssessment:
    return _assess(text, _EDUCATION)


def analyze_skills(text: str) -> SectionAssessment:
    return _assess(text, _SKILLS)


def analyze_projects(text: str) -> SectionAssessment:
    return _assess(text, _PROJECTS)


def analyze_sections(text: str) -> ResumeSections:
    return ResumeSections(
        contact=analyze_contact(text),
        summary=analyze_summary(text),
        experience=analyze_experience(text),
        education=analyze_education(text),
        skills=analyze_skills(text),
        projects=analyze_projects(text),
    )
