"""Analysis result models."""

from dataclasses import dataclass, field
from typing import Optional

from profile_analyzer.profile.models import ProfileData
from profile_analyzer.scoring.models import ProfileScore

NO_SUMMARY = "No summary available"


@dataclass
class AnalysisResult:
    """LLM narrative plus the deterministic score it was anchored to."""

    summary: str = NO_SUMMARY
    strengths: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)
    career_paths: list[str] = field(default_factory=list)
    profile_score: Optional[ProfileScore] = None

    def to_dict(self) -> dict:
        data = {
            "summary": self.summary,
            "strengths": list(self.strengths),
            "suggestions": list(self.suggestions),
            "keywords": list(self.keywords),
            "careerPaths": list(self.career_paths),
        }
        if self.profile_score is not None:
            data["profileScore"] = self.profile_score.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisResult":
        score = data.get("profileScore")
        return cls(
            summary=data.get("summary") or NO_SUMMARY,
            strengths=list(data.get("strengths") or []),
            suggestions=list(data.get("suggestions") or []),
            keywords=list(data.get("keywords") or []),
            career_paths=list(data.get("careerPaths") or []),
            profile_score=ProfileScore.from_dict(score) if score else None,
        )


@dataclass
class ProfileAnalysis:
    """What an analysis request returns: the scraped profile and its analysis."""

    profile: ProfileData
    analysis: AnalysisResult

    def to_dict(self) -> dict:
        return {"profile": self.profile.to_dict(), "analysis": self.analysis.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> "ProfileAnalysis":
        return cls(
            profile=ProfileData.from_dict(data.get("profile") or {}),
            analysis=AnalysisResult.from_dict(data.get("analysis") or {}),
        )
