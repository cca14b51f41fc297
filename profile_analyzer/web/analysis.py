"""Analysis routes — run an analysis, browse stored ones."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from profile_analyzer.analyzer import analyze_profile
from profile_analyzer.config import AppConfig
from profile_analyzer.storage.database import AnalysisDatabase

from .dependencies import get_config, get_db

logger = logging.getLogger("profile_analyzer.web")

router = APIRouter(prefix="/api")

MAX_LIST_LIMIT = 100


def _error(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


@router.post("/analyze-profile")
async def analyze(
    request: Request,
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_config),
):
    try:
        payload = await request.json()
    except ValueError:
        return _error("Request body must be JSON")
    if not isinstance(payload, dict):
        return _error("Request body must be a JSON object")

    url = str(payload.get("url") or "").strip()
    score_only = payload.get("scoreOnly") is True

    try:
        result = await run_in_threadpool(analyze_profile, url, config, score_only)
    except Exception as e:
        logger.error("Error analyzing profile: %s", e)
        return _error(str(e) or "Failed to analyze profile")

    body = result.to_dict()

    # A failed save should not cost the caller their analysis
    try:
        body["id"] = AnalysisDatabase(session=db).save_analysis(url, result)
    except Exception as e:
        db.rollback()
        logger.error("Error saving analysis to history: %s", e)

    return body


@router.get("/analyses")
def list_analyses(limit: int = 3, db: Session = Depends(get_db)):
    limit = max(1, min(limit, MAX_LIST_LIMIT))
    store = AnalysisDatabase(session=db)
    return {
        "total": store.count_analyses(),
        "analyses": [record.to_summary_dict() for record in store.recent_analyses(limit)],
    }


@router.get("/analyses/{analysis_id}")
def get_analysis(analysis_id: int, db: Session = Depends(get_db)):
    result = AnalysisDatabase(session=db).get_analysis(analysis_id)
    if result is None:
        return _error("Analysis not found", status_code=404)
    return result.to_dict()


@router.get("/stats")
def stats(db: Session = Depends(get_db)):
    return AnalysisDatabase(session=db).get_stats()
