from __future__ import annotations

import random

from resume_analyzer.core.config.scoring import get_scoring_value
from resume_analyzer.schemas.analysis import CompetitorComparison

# (minimum overall score, percentile, label), highest bucket first.
_BUCKETS: tuple[tuple[int, int, str], ...] = (
    (9, 95, "Exceptional"),
    (8, 85, "Excellent"),
    (7, 70, "Good"),
    (6, 55, "Above Average"),
    (5, 40, "Below Average"),
)
_FLOOR = (20, "Needs Improvement")


def percentile_for(overall_score: float) -> tuple[int, str]:
    for minimum, percentile, label in _BUCKETS:
        if overall_score >= minimum:
            return percentile, label
    return _FLOOR


def benchmark(overall_score: float, rng: random.Random | None = None) -> CompetitorComparison:
    """Place a score in the simulated applicant pool.

    ``similar_profiles`` is synthetic and random; pass a seeded ``rng`` to make
    it reproducible. Without one a fresh generator is created for this call.
    """
    source = rng if rng is not None else random.Random()
    low = int(get_scoring_value("benchmark.similar_profiles_min", 500))
    high = int(get_scoring_value("benchmark.similar_profiles_max", 1500))

    percentile, label = percentile_for(overall_score)
    return CompetitorComparison(
        percentile=percentile,
        similar_profiles=source.randrange(low, high),
        benchmark=label,
    )
