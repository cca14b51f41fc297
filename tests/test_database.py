"""Tests for analysis storage."""

import os
import tempfile

import pytest

from profile_analyzer.analysis.models import AnalysisResult, ProfileAnalysis
from profile_analyzer.profile.models import ExperienceEntry, ProfileData
from profile_analyzer.scoring.scorer import calculate_profile_score
from profile_analyzer.storage.database import AnalysisDatabase


@pytest.fixture
def db():
    """Create a temporary database for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        db_path = os.path.join(tmpdir, "nested", "test.db")
        database = AnalysisDatabase(f"sqlite:///{db_path}")
        yield database
        database.close()


def make_result(name: str = "Jane Doe", skills: int = 4) -> ProfileAnalysis:
    profile = ProfileData(
        name=name,
        headline="Senior Product Manager",
        location="Berlin",
        profile_picture="https://example.com/jane.jpg",
        experience=[ExperienceEntry("PM", "Acme", "2020 - 2024", "Owned the roadmap")],
        skills=[f"skill{i}" for i in range(skills)],
    )
    analysis = AnalysisResult(
        summary=f"{name} is a strong candidate.",
        strengths=["Roadmaps"],
        suggestions=["Add an about section"],
        keywords=["product"],
        career_paths=["Director of Product"],
        profile_score=calculate_profile_score(profile),
    )
    return ProfileAnalysis(profile=profile, analysis=analysis)


class TestAnalysisDatabase:
    def test_save_and_load(self, db):
        result = make_result()
        analysis_id = db.save_analysis("https://www.linkedin.com/in/jane-doe", result)

        loaded = db.get_analysis(analysis_id)
        assert loaded == result

    def test_record_columns(self, db):
        result = make_result()
        analysis_id = db.save_analysis("https://www.linkedin.com/in/jane-doe", result)

        record = db.get_record(analysis_id)
        assert record.name == "Jane Doe"
        assert record.profile_picture == "https://example.com/jane.jpg"
        assert record.overall_score == result.analysis.profile_score.overall
        assert record.analysis_data["profileScore"] == result.analysis.profile_score.to_dict()

    def test_unknown_id(self, db):
        assert db.get_analysis(999) is None

    def test_recent_newest_first(self, db):
        for name in ("First", "Second", "Third", "Fourth"):
            db.save_analysis(f"https://www.linkedin.com/in/{name.lower()}", make_result(name))

        recent = db.recent_analyses()
        assert [r.name for r in recent] == ["Fourth", "Third", "Second"]
        assert db.count_analyses() == 4

    def test_stats(self, db):
        db.save_analysis("https://www.linkedin.com/in/a", make_result("A", skills=0))
        db.save_analysis("https://www.linkedin.com/in/b", make_result("B", skills=15))

        stats = db.get_stats()
        assert stats["total_analyses"] == 2
        assert stats["last_analysis"]["name"] == "B"
        assert stats["average_score"] is not None

    def test_stats_empty_db(self, db):
        stats = db.get_stats()
        assert stats["total_analyses"] == 0
        assert stats["average_score"] is None
        assert "last_analysis" not in stats

    def test_score_only_result(self, db):
        result = make_result()
        result.analysis.profile_score = None
        analysis_id = db.save_analysis("https://www.linkedin.com/in/jane-doe", result)
        assert db.get_record(analysis_id).overall_score is None
