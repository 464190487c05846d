import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.analysis.keywords import extract_job_keywords, match_keywords  # noqa: E402


class JobKeywordExtractionTests(unittest.TestCase):
    def test_only_canonical_terms_are_extracted(self):
        jd = "We need Kubernetes, SQL, Agile and leadership. Also Python."
        self.assertEqual(extract_job_keywords(jd), ["python", "sql", "kubernetes", "leadership", "agile"])

    def test_unknown_terms_are_ignored(self):
        self.assertEqual(extract_job_keywords("we want rust and haskell"), [])
        self.assertEqual(extract_job_keywords(""), [])


class KeywordMatchingTests(unittest.TestCase):
    def test_industry_vocabulary_partition(self):
        result = match_keywords("i know python and react", "software")
        self.assertEqual(result.matched, ["python", "react"])
        self.assertEqual(
            result.missing,
            ["javascript", "node", "aws", "docker", "git", "api", "database"],
        )
        self.assertEqual(
            result.suggestions,
            [
                "microservices",
                "ci/cd",
                "testing",
                "debugging",
                "code review",
                "results-driven",
                "cross-functional",
                "stakeholder management",
            ],
        )

    def test_job_description_extends_vocabulary_without_duplicates(self):
        jd = "We need Kubernetes, SQL, Agile and leadership. Also Python."
        result = match_keywords("python react sql", "software", jd)
        self.assertEqual(result.matched, ["python", "react", "sql"])
        self.assertEqual(len(result.missing), 10)
        self.assertIn("kubernetes", result.missing)
        self.assertEqual(result.missing.count("python"), 0)

    def test_missing_is_capped(self):
        jd = (
            "javascript python react node sql aws docker kubernetes git api database mongodb "
            "postgresql redis elasticsearch leadership communication"
        )
        result = match_keywords("", "aerospace", jd)
        self.assertEqual(result.matched, [])
        self.assertEqual(len(result.missing), 10)

    def test_matched_terms_are_not_suggested(self):
        result = match_keywords("unit testing and data-driven decisions", "software", "testing")
        self.assertIn("testing", result.matched)
        self.assertNotIn("testing", result.suggestions)
        self.assertLessEqual(len(result.suggestions), 8)

    def test_unknown_industry_only_gets_generic_suggestions(self):
        result = match_keywords("", "general")
        self.assertEqual(result.matched, [])
        self.assertEqual(result.missing, [])
        self.assertEqual(result.suggestions[0], "results-driven")
        self.assertEqual(len(result.suggestions), 8)


if __name__ == "__main__":
    unittest.main()
