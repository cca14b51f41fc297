"""Deterministic profile scoring.

Every section is scored out of 100 from field presence and length checks
only, so the same profile always gets the same score. Missing fields lower
the score; nothing here raises for an empty profile.
"""

import logging
import math

from profile_analyzer.profile.models import UNKNOWN, ProfileData
from profile_analyzer.scoring.models import ProfileScore, ProfileSections, SectionScore
from profile_analyzer.utils.text_processing import (
    INDUSTRY_KEYWORDS,
    build_keyword_corpus,
    count_keyword_matches,
)

logger = logging.getLogger("profile_analyzer.scoring")

# Section weights (sum to 1.0)
WEIGHT_BASIC_INFO = 0.15
WEIGHT_EXPERIENCE = 0.35
WEIGHT_SKILLS = 0.25
WEIGHT_EDUCATION = 0.15
WEIGHT_KEYWORDS = 0.10

EXPERIENCE_ENTRY_MAX = 20
EXPERIENCE_QUALITY_MAX = 80
EDUCATION_ENTRY_MAX = 25
EDUCATION_QUALITY_MAX = 70

# (minimum skill count, score, reason), checked top-down
SKILL_TIERS = (
    (15, 100, "Comprehensive skills section"),
    (10, 80, "Good skills section"),
    (5, 60, "Adequate skills section"),
    (3, 40, "Limited skills section"),
)

# (minimum score, reason), checked top-down
KEYWORD_TIERS = (
    (80, "Excellent keyword optimization"),
    (60, "Good keyword presence"),
    (40, "Moderate keyword presence"),
    (20, "Limited keyword presence"),
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (Python's round() goes to even)."""
    return int(math.floor(value + 0.5))


def _join_reasons(reasons: list[str], default: str) -> str:
    return ", ".join(reasons) if reasons else default


def score_basic_info(profile: ProfileData) -> SectionScore:
    """Name (10), headline (20), location (10) and about section (60)."""
    score = 0
    reasons = []

    if profile.name and profile.name != UNKNOWN:
        score += 10
    else:
        reasons.append("Missing name")

    if profile.headline and len(profile.headline) > 5:
        score += 20
    else:
        reasons.append("Missing or incomplete headline")

    if profile.location and profile.location != UNKNOWN:
        score += 10
    else:
        reasons.append("Missing location")

    about_length = len(profile.about or "")
    if about_length > 500:
        score += 60
    elif about_length > 300:
        score += 45
    elif about_length > 100:
        score += 30
    elif about_length > 0:
        score += 15
        reasons.append("About section is too brief")
    else:
        reasons.append("Missing about section")

    return SectionScore(score, _join_reasons(reasons, "Complete basic information"))


def _description_points(description: str) -> int:
    length = len(description or "")
    if length > 300:
        return 5
    if length > 100:
        return 3
    if length > 0:
        return 1
    return 0


def score_experience(profile: ProfileData) -> SectionScore:
    """Entry count (20) plus normalized per-entry completeness (80)."""
    entries = profile.experience
    if not entries:
        return SectionScore(0, "No experience listed")

    score = 0
    reasons = []

    count = len(entries)
    if count >= 3:
        score += 20
    elif count == 2:
        score += 15
    else:
        score += 10
        reasons.append("Limited work history")

    quality_score = 0
    complete_entries = 0
    for exp in entries:
        entry_score = 0
        if exp.title:
            entry_score += 5
        if exp.company:
            entry_score += 5
        if exp.duration:
            entry_score += 5
        entry_score += _description_points(exp.description)

        if entry_score >= 15:
            complete_entries += 1
        quality_score += entry_score

    max_quality = count * EXPERIENCE_ENTRY_MAX
    score += min(
        EXPERIENCE_QUALITY_MAX,
        round_half_up(quality_score / max_quality * EXPERIENCE_QUALITY_MAX),
    )

    if complete_entries < count:
        reasons.append(f"{count - complete_entries} incomplete experience entries")

    return SectionScore(score, _join_reasons(reasons, "Complete experience section"))


def score_skills(profile: ProfileData) -> SectionScore:
    """Tiered purely by the number of listed skills."""
    count = len(profile.skills)
    if count == 0:
        return SectionScore(0, "No skills listed")

    for minimum, score, reason in SKILL_TIERS:
        if count >= minimum:
            return SectionScore(score, reason)
    return SectionScore(20, "Very few skills listed")


def score_education(profile: ProfileData) -> SectionScore:
    """Entry count (30) plus normalized per-entry completeness (70)."""
    entries = profile.education
    if not entries:
        return SectionScore(0, "No education listed")

    reasons = []
    count = len(entries)
    score = 30 if count >= 2 else 20

    quality_score = 0
    complete_entries = 0
    for edu in entries:
        entry_score = 0
        if edu.school:
            entry_score += 10
        if edu.degree:
            entry_score += 10
        if edu.duration:
            entry_score += 5

        if entry_score >= 20:
            complete_entries += 1
        quality_score += entry_score

    max_quality = count * EDUCATION_ENTRY_MAX
    score += min(
        EDUCATION_QUALITY_MAX,
        round_half_up(quality_score / max_quality * EDUCATION_QUALITY_MAX),
    )

    if complete_entries < count:
        reasons.append(f"{count - complete_entries} incomplete education entries")

    return SectionScore(score, _join_reasons(reasons, "Complete education section"))


def score_keywords(profile: ProfileData, keywords=INDUSTRY_KEYWORDS) -> SectionScore:
    """Share of the industry vocabulary found in the profile text, doubled and capped.

    Matching is by substring, so "management" also counts inside
    "micromanagement", and any match rate of 50% or more scores 100.
    """
    matches = count_keyword_matches(build_keyword_corpus(profile), keywords)
    percentage = matches / len(keywords) * 100
    score = min(100, round_half_up(percentage * 2))

    for minimum, reason in KEYWORD_TIERS:
        if score >= minimum:
            return SectionScore(score, reason)
    return SectionScore(score, "Very few industry keywords")


def calculate_profile_score(profile: ProfileData) -> ProfileScore:
    """Score every section and combine them into a weighted overall score."""
    sections = ProfileSections(
        basic_info=score_basic_info(profile),
        experience=score_experience(profile),
        skills=score_skills(profile),
        education=score_education(profile),
        keywords=score_keywords(profile),
    )

    overall = round_half_up(
        WEIGHT_BASIC_INFO * sections.basic_info.score
        + WEIGHT_EXPERIENCE * sections.experience.score
        + WEIGHT_SKILLS * sections.skills.score
        + WEIGHT_EDUCATION * sections.education.score
        + WEIGHT_KEYWORDS * sections.keywords.score
    )

    logger.debug(
        "Scored '%s': overall=%d (basic=%d, exp=%d, skills=%d, edu=%d, kw=%d)",
        profile.name, overall,
        sections.basic_info.score, sections.experience.score, sections.skills.score,
        sections.education.score, sections.keywords.score,
    )

    return ProfileScore(overall=overall, sections=sections)
