from __future__ import annotations

import re

from resume_analyzer.core.config.scoring import get_scoring_value
from resume_analyzer.schemas.analysis import CompositeScores, ResumeSections

from .lexicon import ATS_KEYWORDS, count_hits, industry_vocabulary
from .numbers import percentage, round_half_up

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def _sentence_count(text: str) -> int:
    # Text without terminal punctuation counts as a single sentence.
    segments = [segment for segment in _SENTENCE_SPLIT_RE.split(text) if segment.strip()]
    return max(len(segments), 1)


def overall_score(sections: ResumeSections) -> int:
    scores = sections.scores()
    return min(round_half_up(sum(scores) / len(scores)), 10)


def ats_score(normalized_text: str) -> int:
    hits = count_hits(normalized_text, ATS_KEYWORDS)
    return min(round_half_up(hits / len(ATS_KEYWORDS) * 10), 10)


def readability_score(text: str) -> int:
    words_per_point = float(get_scoring_value("readability.words_per_point", 5))
    floor = float(get_scoring_value("readability.floor", 1))

    word_count = len(text.split())
    avg_words_per_sentence = word_count / _sentence_count(text)
    raw = max(10 - avg_words_per_sentence / words_per_point, floor)
    return max(1, min(round_half_up(raw), 10))


def keyword_density(normalized_text: str, industry: str) -> int:
    vocabulary = industry_vocabulary(industry)
    return percentage(count_hits(normalized_text, vocabulary), len(vocabulary))


def aggregate(sections: ResumeSections, text: str, industry: str) -> CompositeScores:
    """Combine section assessments and whole-text heuristics into the four composite scores."""
    normalized = text.lower()
    return CompositeScores(
        overall_score=overall_score(sections),
        ats_score=ats_score(normalized),
        readability_score=readability_score(text),
        keyword_density=keyword_density(normalized, industry),
    )
