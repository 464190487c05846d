import logging

from fastapi import APIRouter, HTTPException, Request, status

from resume_analyzer.core.rate_limit import client_key, rate_limit
from resume_analyzer.schemas.api import AnalyzeRequest, AnalyzeResponse
from resume_analyzer.services.analysis_service import AnalysisValidationError, run_analysis

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    summary="Analyze Resume",
    description="Score resume text and return section feedback, keyword gaps and recommendations.",
)
@rate_limit()
def analyze_resume(request: Request, payload: AnalyzeRequest):
    client = client_key(request)
    try:
        return run_analysis(
            payload,
            client=client,
            user_agent=request.headers.get("user-agent", "unknown"),
        )
    except AnalysisValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("resume_analysis_failed client=%s", client)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Advanced analysis failed",
        ) from exc
