from __future__ import annotations

import logging
import sqlite3
import time
from datetime import datetime
from typing import Any

from resume_analyzer.analysis import analyze
from resume_analyzer.core.config import settings
from resume_analyzer.history import db as history_db
from resume_analyzer.schemas.api import (
    AnalyzeRequest,
    AnalyzeResponse,
    HistoryComparison,
    HistoryIndustryFit,
    HistoryResponse,
    ResumeHistoryItem,
)

logger = logging.getLogger(__name__)

PROVIDER = "advanced-analyzer"
VERSION = "2.0"
PREVIEW_CHARS = 150
MAX_HISTORY_LIMIT = 50


class AnalysisValidationError(ValueError):
    pass


def validate_resume_text(resume_text: str) -> None:
    if len(resume_text.strip()) < settings.resume_min_chars:
        raise AnalysisValidationError(
            f"Resume text is too short (minimum {settings.resume_min_chars} characters)"
        )
    if len(resume_text) > settings.resume_max_chars:
        raise AnalysisValidationError(
            f"Resume text is too long (maximum {settings.resume_max_chars:,} characters)"
        )


def _temporary_id() -> str:
    return f"temp-{int(time.time() * 1000)}"


def _store_analysis(payload: AnalyzeRequest, analysis: dict[str, Any], client: str, user_agent: str) -> str | None:
    if not settings.history_enabled:
        return None
    try:
        return history_db.save_analysis(
            resume_text=payload.resume_text,
            job_description=payload.job_description,
            target_industry=payload.target_industry,
            analysis=analysis,
            ip_address=client,
            user_agent=user_agent,
            ai_provider=PROVIDER,
            version=VERSION,
        )
    except (sqlite3.Error, OSError) as exc:
        logger.warning("resume_analysis_save_failed client=%s: %s", client, exc)
        return None


def run_analysis(payload: AnalyzeRequest, *, client: str = "anonymous", user_agent: str = "unknown") -> AnalyzeResponse:
    validate_resume_text(payload.resume_text)

    started = time.perf_counter()
    analysis = analyze(payload.resume_text, payload.job_description, payload.target_industry)
    latency_ms = int((time.perf_counter() - started) * 1000)

    saved_id = _store_analysis(payload, analysis.model_dump(mode="json", by_alias=True), client, user_agent)
    logger.info(
        "resume_analysis client=%s industry=%s overall=%s stored=%s latency_ms=%s",
        client,
        analysis.industry_fit.detected_industry,
        analysis.overall_score,
        saved_id is not None,
        latency_ms,
    )
    return AnalyzeResponse(
        analysis=analysis,
        id=saved_id or _temporary_id(),
        provider=PROVIDER,
        version=VERSION,
    )


def _history_item(row: dict[str, Any]) -> ResumeHistoryItem:
    analysis = row.get("analysis") or {}
    industry_fit = analysis.get("industryFit") or {}
    comparison = analysis.get("competitorComparison") or {}
    resume_text = row.get("resume_text") or ""
    return ResumeHistoryItem(
        id=row["id"],
        overall_score=int(analysis.get("overallScore", 0)),
        ats_score=int(analysis.get("atsScore", 0)),
        readability_score=int(analysis.get("readabilityScore", 0)),
        keyword_density=int(analysis.get("keywordDensity", 0)),
        industry_fit=HistoryIndustryFit(
            detected_industry=str(industry_fit.get("detectedIndustry", "general")),
            confidence=int(industry_fit.get("confidence", 0)),
        ),
        competitor_comparison=HistoryComparison(
            percentile=int(comparison.get("percentile", 0)),
            benchmark=str(comparison.get("benchmark", "")),
        ),
        created_at=datetime.fromisoformat(row["created_at"]),
        preview=resume_text[:PREVIEW_CHARS] + "...",
        version=row.get("version"),
    )


def list_history(*, limit: int = MAX_HISTORY_LIMIT, page: int = 1) -> HistoryResponse:
    limit = max(1, min(limit, MAX_HISTORY_LIMIT))
    page = max(1, page)
    rows = history_db.get_recent_analyses(limit=limit, offset=(page - 1) * limit)
    return HistoryResponse(
        analyses=[_history_item(row) for row in rows],
        total=history_db.count_analyses(),
        page=page,
        limit=limit,
    )
