"""Normalize raw LLM output into an AnalysisResult."""

import json
import logging
import re

from profile_analyzer.analysis.models import NO_SUMMARY, AnalysisResult
from profile_analyzer.scoring.models import ProfileScore
from profile_analyzer.utils.text_processing import extract_list_items, split_keywords

logger = logging.getLogger("profile_analyzer.analysis.parser")

_FLAGS = re.IGNORECASE | re.DOTALL

# Fallback patterns for replies that ignored the JSON instruction
SUMMARY_PATTERN = re.compile(
    r"(?:Summary|Professional Summary)[:\s]+(.+?)(?:\n\n|\n(?=\d|Strengths|Key Strengths))", _FLAGS
)
STRENGTHS_PATTERN = re.compile(
    r"(?:Strengths|Key Strengths)[:\s]+(.+?)(?:\n\n|\n(?=\d|Suggestions))", _FLAGS
)
SUGGESTIONS_PATTERN = re.compile(
    r"(?:Suggestions|Improvements)[:\s]+(.+?)(?:\n\n|\n(?=\d|Keywords))", _FLAGS
)
KEYWORDS_PATTERN = re.compile(
    r"(?:Keywords)[:\s]+(.+?)(?:\n\n|\n(?=\d|Career|Potential))", _FLAGS
)
CAREER_PATHS_PATTERN = re.compile(
    r"(?:Career Paths|Potential Roles|Suitable Roles)[:\s]+(.+?)(?:\n\n|$)", _FLAGS
)


def _strip_code_fence(content: str) -> str:
    content = content.strip()
    if content.startswith("```") and "\n" in content:
        content = content.split("\n", 1)[1].rsplit("```", 1)[0].strip()
    return content


def _as_list(value) -> list:
    return list(value) if isinstance(value, list) else []


def _match_group(pattern: re.Pattern, text: str) -> str | None:
    match = pattern.search(text)
    return match.group(1) if match else None


def parse_json_analysis(data: dict, profile_score: ProfileScore | None = None) -> AnalysisResult:
    return AnalysisResult(
        summary=data.get("summary") or NO_SUMMARY,
        strengths=_as_list(data.get("strengths")),
        suggestions=_as_list(data.get("suggestions")),
        keywords=_as_list(data.get("keywords")),
        career_paths=_as_list(data.get("careerPaths")),
        profile_score=profile_score,
    )


def parse_text_analysis(text: str, profile_score: ProfileScore | None = None) -> AnalysisResult:
    """Best-effort extraction from a free-text reply with headed sections."""
    summary = _match_group(SUMMARY_PATTERN, text)
    return AnalysisResult(
        summary=summary.strip() if summary else NO_SUMMARY,
        strengths=extract_list_items(_match_group(STRENGTHS_PATTERN, text)),
        suggestions=extract_list_items(_match_group(SUGGESTIONS_PATTERN, text)),
        keywords=split_keywords(_match_group(KEYWORDS_PATTERN, text)),
        career_paths=extract_list_items(_match_group(CAREER_PATHS_PATTERN, text)),
        profile_score=profile_score,
    )


def parse_analysis_response(content: str, profile_score: ProfileScore | None = None) -> AnalysisResult:
    """Parse the model reply as JSON, falling back to section regexes."""
    try:
        data = json.loads(_strip_code_fence(content))
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse analysis response as JSON: %s", e)
        logger.debug("Raw response: %s", content)
        return parse_text_analysis(content, profile_score)

    if not isinstance(data, dict):
        logger.warning("Analysis response JSON is a %s, not an object", type(data).__name__)
        data = {}

    return parse_json_analysis(data, profile_score)
