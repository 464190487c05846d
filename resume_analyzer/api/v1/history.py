import logging
import sqlite3

from fastapi import APIRouter, HTTPException, Query, status

from resume_analyzer.schemas.api import HistoryResponse
from resume_analyzer.services.analysis_service import MAX_HISTORY_LIMIT, list_history

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/resumes", response_model=HistoryResponse, summary="Analysis History")
def resumes(
    limit: int = Query(default=MAX_HISTORY_LIMIT, ge=1, le=MAX_HISTORY_LIMIT),
    page: int = Query(default=1, ge=1),
):
    try:
        return list_history(limit=limit, page=page)
    except sqlite3.Error as exc:
        logger.exception("resume_history_failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch history",
        ) from exc
