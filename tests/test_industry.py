import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.analysis.industry import (  # noqa: E402
    analyze_industry_fit,
    detect_industry,
    resolve_industry,
)
from resume_analyzer.analysis.lexicon import INDUSTRY_KEYWORDS  # noqa: E402


class IndustryDetectionTests(unittest.TestCase):
    def test_software_keywords_dominate(self):
        text = "software engineer. experienced in javascript, react, node."
        self.assertEqual(detect_industry(text), "software")

    def test_no_hits_falls_back_to_general(self):
        self.assertEqual(detect_industry("hello world"), "general")
        self.assertEqual(detect_industry(""), "general")

    def test_ties_keep_first_industry_in_table_order(self):
        # one finance hit (excel) and one sales hit (crm)
        self.assertEqual(detect_industry("excel and crm"), "finance")

    def test_override_is_trusted_verbatim(self):
        self.assertEqual(resolve_industry("javascript react node", "aerospace"), "aerospace")
        self.assertEqual(resolve_industry("javascript react node", None), "software")

    def test_lexicon_is_read_only(self):
        with self.assertRaises(TypeError):
            INDUSTRY_KEYWORDS["software"] = ("cobol",)  # type: ignore[index]


class IndustryFitTests(unittest.TestCase):
    def test_full_vocabulary_gives_full_confidence(self):
        text = "javascript python react node aws docker git api database"
        fit = analyze_industry_fit(text, "software")
        self.assertEqual(fit.detected_industry, "software")
        self.assertEqual(fit.confidence, 100)
        self.assertEqual(fit.suggestions, [])

    def test_partial_fit_gets_industry_suggestions(self):
        fit = analyze_industry_fit("javascript python react node", "software")
        self.assertEqual(fit.confidence, 44)
        self.assertEqual(
            fit.suggestions,
            [
                "Add more software-specific keywords and terminology",
                "Include relevant tools and technologies used in software",
                "Highlight software industry experience and projects",
            ],
        )

    def test_unknown_industry_degrades_to_zero_confidence(self):
        fit = analyze_industry_fit("javascript python", "aerospace")
        self.assertEqual(fit.confidence, 0)
        self.assertEqual(len(fit.suggestions), 4)
        self.assertEqual(
            fit.suggestions[-1],
            "Consider targeting a different industry that better matches your background",
        )


if __name__ == "__main__":
    unittest.main()
