"""Tests for LLM reply parsing."""

import json

from profile_analyzer.analysis.parser import parse_analysis_response, parse_text_analysis
from profile_analyzer.profile.models import ProfileData
from profile_analyzer.scoring.scorer import calculate_profile_score

JSON_REPLY = {
    "summary": "Seasoned product leader.",
    "strengths": ["Roadmapping", "Stakeholder management"],
    "suggestions": ["Add metrics"],
    "keywords": ["product", "agile"],
    "careerPaths": ["Director of Product"],
}

TEXT_REPLY = """Summary: Jane is a seasoned product leader.

Strengths:
- Roadmapping
- Stakeholder management

Suggestions:
- Add metrics to each role
- Expand the about section

Keywords: product, agile, roadmap

Career Paths:
- Director of Product
- VP Product"""


class TestJsonReplies:
    def test_plain_json(self):
        result = parse_analysis_response(json.dumps(JSON_REPLY))
        assert result.summary == "Seasoned product leader."
        assert result.strengths == ["Roadmapping", "Stakeholder management"]
        assert result.career_paths == ["Director of Product"]
        assert result.profile_score is None

    def test_code_fenced_json(self):
        content = "```json\n" + json.dumps(JSON_REPLY) + "\n```"
        assert parse_analysis_response(content).keywords == ["product", "agile"]

    def test_score_attached(self):
        score = calculate_profile_score(ProfileData(name="Jane"))
        result = parse_analysis_response(json.dumps(JSON_REPLY), score)
        assert result.profile_score == score

    def test_non_list_fields_become_empty(self):
        result = parse_analysis_response(json.dumps({"summary": "ok", "strengths": "one", "keywords": None}))
        assert result.summary == "ok"
        assert result.strengths == []
        assert result.keywords == []

    def test_missing_summary(self):
        result = parse_analysis_response(json.dumps({"strengths": ["x"]}))
        assert result.summary == "No summary available"
        assert result.suggestions == []

    def test_json_array_treated_as_empty(self):
        result = parse_analysis_response("[1, 2, 3]")
        assert result.summary == "No summary available"
        assert result.strengths == []


class TestTextFallback:
    def test_sections_extracted(self):
        result = parse_analysis_response(TEXT_REPLY)
        assert result.summary == "Jane is a seasoned product leader."
        assert result.strengths == ["Roadmapping", "Stakeholder management"]
        assert result.suggestions == ["Add metrics to each role", "Expand the about section"]
        assert result.keywords == ["product", "agile", "roadmap"]
        assert result.career_paths == ["Director of Product", "VP Product"]

    def test_unstructured_text(self):
        result = parse_text_analysis("The model had nothing useful to say.")
        assert result.summary == "No summary available"
        assert result.strengths == []
        assert result.suggestions == []
        assert result.keywords == []
        assert result.career_paths == []

    def test_score_attached_on_fallback(self):
        score = calculate_profile_score(ProfileData(name="Jane"))
        assert parse_analysis_response("not json", score).profile_score == score
