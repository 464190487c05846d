from .analysis import (
    SECTION_NAMES,
    CompetitorComparison,
    CompositeScores,
    IndustryFit,
    KeywordMatching,
    Recommendation,
    ResumeAnalysis,
    ResumeSections,
    SectionAssessment,
)
from .api import AnalyzeRequest, AnalyzeResponse, HistoryResponse, ResumeHistoryItem

__all__ = [
    "SECTION_NAMES",
    "SectionAssessment",
    "ResumeSections",
    "CompositeScores",
    "IndustryFit",
    "KeywordMatching",
    "Recommendation",
    "CompetitorComparison",
    "ResumeAnalysis",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "ResumeHistoryItem",
    "HistoryResponse",
]
