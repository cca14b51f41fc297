"""Analysis facade: scrape, score, then ask the LLM for a narrative."""

import logging

from profile_analyzer.analysis.llm import generate_analysis
from profile_analyzer.analysis.models import AnalysisResult, ProfileAnalysis
from profile_analyzer.config import AppConfig
from profile_analyzer.profile.linkedin_scraper import scrape_linkedin_profile, validate_linkedin_url
from profile_analyzer.profile.models import ProfileData
from profile_analyzer.scoring.scorer import calculate_profile_score

logger = logging.getLogger("profile_analyzer.analyzer")

SKIPPED_SUMMARY = "Analysis skipped (score only)"


def analyze_scraped_profile(
    profile: ProfileData,
    config: AppConfig,
    score_only: bool = False,
) -> AnalysisResult:
    """Score an already-scraped profile and, unless score_only, run the LLM."""
    profile_score = calculate_profile_score(profile)
    logger.info("Profile score for '%s': %d/100", profile.name, profile_score.overall)

    if score_only:
        return AnalysisResult(summary=SKIPPED_SUMMARY, profile_score=profile_score)

    return generate_analysis(
        profile,
        profile_score,
        api_key=config.api_keys.openai_api_key,
        llm=config.llm,
    )


def analyze_profile(url: str, config: AppConfig, score_only: bool = False) -> ProfileAnalysis:
    """Run one analysis request end to end. Any step failing aborts the request."""
    identifier = validate_linkedin_url(url)
    logger.info("Analyzing LinkedIn profile: %s", identifier)

    profile = scrape_linkedin_profile(url, config.api_keys, config.scraper)
    analysis = analyze_scraped_profile(profile, config, score_only=score_only)

    return ProfileAnalysis(profile=profile, analysis=analysis)
