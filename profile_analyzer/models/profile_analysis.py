"""Profile analysis record: one row per analysis request."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from profile_analyzer.analysis.models import ProfileAnalysis

from .base import Base


class ProfileAnalysisRecord(Base):
    __tablename__ = "profile_analyses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    url: Mapped[str] = mapped_column(String(512), default="")

    name: Mapped[str] = mapped_column(String(255), default="")
    headline: Mapped[str] = mapped_column(String(500), default="")
    profile_picture: Mapped[str] = mapped_column(String(2048), default="")

    summary: Mapped[str] = mapped_column(Text, default="")
    strengths: Mapped[list] = mapped_column(JSON, default=list)
    suggestions: Mapped[list] = mapped_column(JSON, default=list)
    keywords: Mapped[list] = mapped_column(JSON, default=list)
    overall_score: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)

    profile_data: Mapped[dict] = mapped_column(JSON, default=dict)
    analysis_data: Mapped[dict] = mapped_column(JSON, default=dict)  # includes profileScore

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True
    )

    @classmethod
    def from_profile_analysis(cls, url: str, result: ProfileAnalysis) -> "ProfileAnalysisRecord":
        profile, analysis = result.profile, result.analysis
        return cls(
            url=url,
            name=profile.name,
            headline=profile.headline,
            profile_picture=profile.profile_picture,
            summary=analysis.summary,
            strengths=list(analysis.strengths),
            suggestions=list(analysis.suggestions),
            keywords=list(analysis.keywords),
            overall_score=analysis.profile_score.overall if analysis.profile_score else None,
            profile_data=profile.to_dict(),
            analysis_data=analysis.to_dict(),
        )

    def to_profile_analysis(self) -> ProfileAnalysis:
        """Rebuild the domain objects from the stored JSON columns."""
        return ProfileAnalysis.from_dict({
            "profile": self.profile_data or {},
            "analysis": self.analysis_data or {},
        })

    def to_summary_dict(self) -> dict:
        """Compact listing entry for history views."""
        return {
            "id": self.id,
            "url": self.url,
            "name": self.name,
            "headline": self.headline,
            "profilePicture": self.profile_picture,
            "summary": self.summary,
            "overallScore": self.overall_score,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
