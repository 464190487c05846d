import random
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.analysis import analyze  # noqa: E402
from resume_analyzer.analysis.sections import analyze_contact  # noqa: E402
from resume_analyzer.schemas.analysis import ResumeAnalysis  # noqa: E402

SCENARIO_RESUME = (
    "Software Engineer. Experienced in javascript, react, node. Contact: jane@x.com, (555) 123-4567. "
    "University of X, Bachelor's degree 2020."
)

FULL_RESUME = (
    "Jane Doe\n"
    "jane.doe@example.com | (555) 123-4567 | linkedin.com/in/janedoe | Austin, TX city\n"
    "Professional Summary\n"
    "Experienced full-stack developer passionate about reliable systems and seeking a senior role.\n"
    "Work Experience\n"
    "Senior Developer, Acme Corp, 2019 - Present\n"
    "- Led a team of five engineers and managed releases for the payments platform.\n"
    "- Developed a Python and Node API on AWS with Docker, improved latency by 35%.\n"
    "- Implemented CI pipelines and reduced deployment time by 50%.\n"
    "Education\n"
    "Bachelor of Science in Computer Science, State University, graduated 2018, GPA 3.8\n"
    "Skills\n"
    "Programming: JavaScript, React, Git, database design. Communication and leadership. "
    "Microsoft Azure, Google Cloud. Languages: English, Spanish.\n"
    "Projects\n"
    "Built an open source budgeting tool using React; result: 2k users. https://github.com/jane/budget\n"
    "Certifications: AWS Certified Developer.\n"
)


class PipelineScenarioTests(unittest.TestCase):
    def test_scenario_resume(self):
        analysis = analyze(SCENARIO_RESUME)
        self.assertEqual(analysis.industry_fit.detected_industry, "software")
        self.assertTrue(analysis.sections.contact.present)
        self.assertTrue(analysis.sections.education.present)
        self.assertEqual(analysis.keyword_matching.matched, ["javascript", "react", "node"])
        self.assertEqual(analysis.industry_fit.confidence, 33)
        self.assertEqual(analysis.keyword_density, 33)
        self.assertEqual(analysis.missing_skills, analysis.keyword_matching.missing[:5])

    def test_empty_resume(self):
        analysis = analyze("")
        for name, section in analysis.sections.items():
            self.assertFalse(section.present, name)
        self.assertEqual(analysis.overall_score, 0)
        self.assertEqual(analysis.industry_fit.detected_industry, "general")
        titles = [item.title for item in analysis.recommendations]
        self.assertIn("Resume Needs Major Improvements", titles)
        self.assertIn("Expand Resume Content", titles)
        self.assertEqual(analysis.competitor_comparison.benchmark, "Needs Improvement")

    def test_full_resume_scores_well(self):
        analysis = analyze(FULL_RESUME)
        self.assertEqual(analysis.industry_fit.detected_industry, "software")
        self.assertGreaterEqual(analysis.overall_score, 8)
        for name, section in analysis.sections.items():
            self.assertTrue(section.present, name)
        titles = [item.title for item in analysis.recommendations]
        self.assertNotIn("Resume Needs Major Improvements", titles)
        self.assertNotIn("Add Portfolio Links", titles)

    def test_target_industry_override(self):
        analysis = analyze(FULL_RESUME, target_industry="aerospace")
        self.assertEqual(analysis.industry_fit.detected_industry, "aerospace")
        self.assertEqual(analysis.industry_fit.confidence, 0)
        self.assertEqual(analysis.keyword_density, 0)

    def test_blank_target_industry_is_ignored(self):
        analysis = analyze(SCENARIO_RESUME, target_industry="   ")
        self.assertEqual(analysis.industry_fit.detected_industry, "software")

    def test_target_industry_is_kept_verbatim(self):
        analysis = analyze(SCENARIO_RESUME, target_industry=" software ")
        self.assertEqual(analysis.industry_fit.detected_industry, " software ")
        self.assertEqual(analysis.industry_fit.confidence, 0)

    def test_job_description_keywords_are_considered(self):
        analysis = analyze(SCENARIO_RESUME, job_description="Kubernetes and SQL required")
        self.assertIn("kubernetes", analysis.keyword_matching.missing)
        self.assertIn("sql", analysis.keyword_matching.missing)


class PipelinePropertyTests(unittest.TestCase):
    def _without_random_field(self, analysis: ResumeAnalysis) -> dict:
        dumped = analysis.model_dump()
        dumped["competitor_comparison"].pop("similar_profiles")
        return dumped

    def test_deterministic_except_similar_profiles(self):
        first = analyze(FULL_RESUME)
        second = analyze(FULL_RESUME)
        self.assertEqual(self._without_random_field(first), self._without_random_field(second))

    def test_seeded_rng_makes_everything_reproducible(self):
        first = analyze(FULL_RESUME, rng=random.Random(7))
        second = analyze(FULL_RESUME, rng=random.Random(7))
        self.assertEqual(first, second)

    def test_degenerate_inputs_are_total(self):
        for text in ("", "a", "x" * 25000, "Managed teams. " * 1600):
            analysis = analyze(text)
            self.assertTrue(0 <= analysis.overall_score <= 10)
            self.assertTrue(0 <= analysis.ats_score <= 10)
            self.assertTrue(1 <= analysis.readability_score <= 10)
            self.assertTrue(0 <= analysis.keyword_density <= 100)
            self.assertLessEqual(len(analysis.recommendations), 8)
            self.assertGreaterEqual(len(analysis.strengths), 3)
            self.assertGreaterEqual(len(analysis.improvements), 3)
            self.assertTrue(analysis.summary)

    def test_adding_a_probe_never_lowers_section_score(self):
        base = "jane@example.com"
        self.assertLessEqual(analyze_contact(base).score, analyze_contact(base + " linkedin").score)
        self.assertLessEqual(
            analyze(base).sections.contact.score,
            analyze(base + " (555) 123-4567").sections.contact.score,
        )

    def test_camel_case_wire_format(self):
        payload = analyze(SCENARIO_RESUME).model_dump(mode="json", by_alias=True)
        for key in (
            "overallScore",
            "atsScore",
            "readabilityScore",
            "keywordDensity",
            "strengths",
            "improvements",
            "missingSkills",
            "keywordMatching",
            "sections",
            "industryFit",
            "competitorComparison",
            "summary",
            "recommendations",
        ):
            self.assertIn(key, payload)
        self.assertIn("detectedIndustry", payload["industryFit"])
        self.assertIn("similarProfiles", payload["competitorComparison"])
        self.assertEqual(
            set(payload["sections"]),
            {"contact", "summary", "experience", "education", "skills", "projects"},
        )


if __name__ == "__main__":
    unittest.main()
