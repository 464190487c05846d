import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.analysis.highlights import generate_improvements, generate_strengths  # noqa: E402
from resume_analyzer.analysis.sections import analyze_sections  # noqa: E402


class StrengthsTests(unittest.TestCase):
    def test_empty_resume_gets_default_strengths(self):
        self.assertEqual(
            generate_strengths("", analyze_sections("")),
            [
                "Professional presentation and formatting",
                "Clear communication of qualifications",
                "Relevant industry experience highlighted",
            ],
        )

    def test_content_signals_become_strengths(self):
        text = "Led a team project that increased revenue by 20%. Certified Scrum Master."
        strengths = generate_strengths(text, analyze_sections(text.lower()))
        self.assertIn("Quantified achievements with measurable results", strengths)
        self.assertIn("Demonstrates leadership and management experience", strengths)
        self.assertIn("Shows collaborative project experience", strengths)
        self.assertIn("Professional certifications enhance credibility", strengths)
        self.assertLessEqual(len(strengths), 5)

    def test_strong_sections_are_listed_first(self):
        text = "jane@example.com (555) 123-4567 linkedin new york city"
        strengths = generate_strengths(text, analyze_sections(text.lower()))
        self.assertEqual(strengths[0], "Excellent contact section with comprehensive information")


class ImprovementsTests(unittest.TestCase):
    def test_empty_resume_improvements_come_from_sections(self):
        self.assertEqual(
            generate_improvements("", analyze_sections("")),
            [
                "Add professional email address",
                "Add a professional summary or objective statement",
                "Add work experience section",
                "Add education section",
                "Add a dedicated skills section",
            ],
        )

    def test_list_is_bounded(self):
        for text in ("", "a", "volunteer award 20% https://github.com/x " * 60):
            improvements = generate_improvements(text, analyze_sections(text.lower()))
            self.assertGreaterEqual(len(improvements), 3)
            self.assertLessEqual(len(improvements), 5)


if __name__ == "__main__":
    unittest.main()
