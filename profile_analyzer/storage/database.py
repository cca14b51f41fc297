"""Storage for completed profile analyses."""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from profile_analyzer.analysis.models import ProfileAnalysis
from profile_analyzer.config import DEFAULT_DATABASE_URL
from profile_analyzer.models import ProfileAnalysisRecord, init_db, make_engine, make_session_factory

logger = logging.getLogger("profile_analyzer.storage")


class AnalysisDatabase:
    """Analysis history store.

    Owns its engine when built from a URL; pass ``session`` to reuse one
    managed elsewhere (e.g. a request-scoped session in the web app).
    """

    def __init__(self, database_url: str = DEFAULT_DATABASE_URL, session: Optional[Session] = None):
        self.engine = None
        if session is None:
            self.engine = make_engine(database_url)
            init_db(self.engine)
            session = make_session_factory(self.engine)()
        self.session: Optional[Session] = session

    def save_analysis(self, url: str, result: ProfileAnalysis) -> int:
        """Persist one analysis verbatim and return its id."""
        record = ProfileAnalysisRecord.from_profile_analysis(url, result)
        self.session.add(record)
        self.session.commit()
        logger.info("Saved analysis #%d for %s", record.id, record.name or url)
        return record.id

    def get_record(self, analysis_id: int) -> Optional[ProfileAnalysisRecord]:
        return self.session.get(ProfileAnalysisRecord, analysis_id)

    def get_analysis(self, analysis_id: int) -> Optional[ProfileAnalysis]:
        """Load a stored analysis, or None if the id is unknown."""
        record = self.get_record(analysis_id)
        return record.to_profile_analysis() if record else None

    def recent_analyses(self, limit: int = 3) -> list[ProfileAnalysisRecord]:
        """Most recent analyses, newest first."""
        stmt = (
            select(ProfileAnalysisRecord)
            .order_by(ProfileAnalysisRecord.created_at.desc(), ProfileAnalysisRecord.id.desc())
            .limit(limit)
        )
        return list(self.session.scalars(stmt))

    def count_analyses(self) -> int:
        return self.session.scalar(select(func.count(ProfileAnalysisRecord.id))) or 0

    def get_stats(self) -> dict:
        """Get analysis history statistics."""
        stats = {"total_analyses": self.count_analyses()}

        average = self.session.scalar(select(func.avg(ProfileAnalysisRecord.overall_score)))
        stats["average_score"] = round(float(average), 1) if average is not None else None

        recent = self.recent_analyses(limit=1)
        if recent:
            last = recent[0]
            stats["last_analysis"] = {
                "id": last.id,
                "name": last.name,
                "url": last.url,
                "overall_score": last.overall_score,
                "created_at": last.created_at.isoformat() if last.created_at else None,
            }

        return stats

    def close(self):
        if self.session is not None:
            self.session.close()
            self.session = None
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
