"""Tests for data models."""

import dataclasses

import pytest

from profile_analyzer.analysis.models import AnalysisResult, ProfileAnalysis
from profile_analyzer.profile.models import EducationEntry, ExperienceEntry, ProfileData
from profile_analyzer.scoring.models import ProfileScore, SectionScore
from profile_analyzer.scoring.scorer import calculate_profile_score


def make_profile() -> ProfileData:
    return ProfileData(
        name="John Doe",
        headline="Backend Engineer",
        location="Austin, TX",
        profile_picture="https://example.com/john.jpg",
        about="Builds reliable services.",
        experience=[ExperienceEntry("Engineer", "Acme", "2020 - 2023", "APIs")],
        education=[EducationEntry("UT Austin", "BS CS", "2014 - 2018")],
        skills=["python", "go"],
    )


class TestProfileData:
    def test_to_summary_string(self):
        summary = make_profile().to_summary_string()
        assert "John Doe" in summary
        assert "Backend Engineer" in summary
        assert "Experience: 1 entries" in summary
        assert "python, go" in summary

    def test_empty_profile_summary(self):
        assert ProfileData().to_summary_string() == ""

    def test_to_dict_uses_camel_case(self):
        d = make_profile().to_dict()
        assert d["profilePicture"] == "https://example.com/john.jpg"
        assert d["experience"][0]["company"] == "Acme"
        assert d["education"][0]["degree"] == "BS CS"

    def test_from_dict_tolerates_missing_keys(self):
        profile = ProfileData.from_dict({"name": "Ann", "experience": [{"title": "CTO"}]})
        assert profile.name == "Ann"
        assert profile.headline == ""
        assert profile.experience == [ExperienceEntry(title="CTO")]
        assert profile.education == []

    def test_dict_round_trip(self):
        profile = make_profile()
        assert ProfileData.from_dict(profile.to_dict()) == profile


class TestProfileScore:
    def test_to_dict_shape(self):
        d = calculate_profile_score(make_profile()).to_dict()
        assert set(d) == {"overall", "sections"}
        assert list(d["sections"]) == ["basicInfo", "experience", "skills", "education", "keywords"]
        assert set(d["sections"]["skills"]) == {"score", "reason"}

    def test_from_dict(self):
        score = calculate_profile_score(make_profile())
        assert ProfileScore.from_dict(score.to_dict()) == score

    def test_is_immutable(self):
        score = calculate_profile_score(make_profile())
        with pytest.raises(dataclasses.FrozenInstanceError):
            score.overall = 5
        with pytest.raises(dataclasses.FrozenInstanceError):
            score.sections.skills.score = 5

    def test_iter_sections_labels(self):
        score = calculate_profile_score(make_profile())
        labels = [label for label, _ in score.iter_sections()]
        assert labels == ["Basic Info", "Experience", "Skills", "Education", "Keywords"]

    def test_section_from_dict_defaults(self):
        assert SectionScore.from_dict({}) == SectionScore(0, "")


class TestAnalysisResult:
    def test_defaults(self):
        result = AnalysisResult.from_dict({})
        assert result.summary == "No summary available"
        assert result.career_paths == []
        assert result.profile_score is None

    def test_to_dict_includes_score(self):
        score = calculate_profile_score(make_profile())
        d = AnalysisResult(summary="Good", career_paths=["CTO"], profile_score=score).to_dict()
        assert d["careerPaths"] == ["CTO"]
        assert d["profileScore"] == score.to_dict()

    def test_to_dict_without_score(self):
        assert "profileScore" not in AnalysisResult().to_dict()

    def test_profile_analysis_round_trip(self):
        analysis = ProfileAnalysis(
            profile=make_profile(),
            analysis=AnalysisResult(
                summary="Solid engineer",
                strengths=["APIs"],
                profile_score=calculate_profile_score(make_profile()),
            ),
        )
        assert ProfileAnalysis.from_dict(analysis.to_dict()) == analysis
