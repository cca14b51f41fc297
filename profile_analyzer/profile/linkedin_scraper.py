"""LinkedIn profile scraping through the RapidAPI LinkedIn Data API."""

import logging
import re

from profile_analyzer.config import ApiKeys, ScraperConfig
from profile_analyzer.profile.models import UNKNOWN, EducationEntry, ExperienceEntry, ProfileData
from profile_analyzer.utils.exceptions import ScrapeError
from profile_analyzer.utils.http_client import create_session, get_json

logger = logging.getLogger("profile_analyzer.profile.linkedin")

PROFILE_URL_PATTERN = re.compile(r"linkedin\.com/in/([\w-]+)")
PROFILE_ENDPOINT = "/get-profile-data-by-url"


def validate_linkedin_url(linkedin_url: str) -> str:
    """Check the URL points at a public profile and return its identifier."""
    if not linkedin_url:
        raise ValueError("Missing LinkedIn profile URL")

    match = PROFILE_URL_PATTERN.search(linkedin_url)
    if not match:
        raise ValueError("Invalid LinkedIn profile URL")
    return match.group(1)


def scrape_linkedin_profile(
    linkedin_url: str,
    api_keys: ApiKeys,
    scraper: ScraperConfig | None = None,
) -> ProfileData:
    """Fetch a profile by URL and normalize it into ProfileData.

    One request, no retries. Any failure is raised as ScrapeError.
    """
    scraper = scraper or ScraperConfig()

    if not api_keys.rapidapi_key:
        logger.error("RAPID_API_KEY environment variable is not set")
        raise ScrapeError("RAPID_API_KEY environment variable is not set")

    session = create_session(api_keys.rapidapi_key, scraper.api_host)
    try:
        data = get_json(
            f"https://{scraper.api_host}{PROFILE_ENDPOINT}",
            session=session,
            timeout=scraper.timeout,
            params={"url": linkedin_url},
        )
    except ScrapeError as e:
        logger.error("Error scraping LinkedIn profile: %s", e)
        raise ScrapeError(f"Failed to scrape LinkedIn profile: {e}") from e
    finally:
        session.close()

    if not isinstance(data, dict):
        raise ScrapeError("Failed to scrape LinkedIn profile: unexpected response shape")

    profile = normalize_profile_response(data)
    logger.info(
        "Scraped LinkedIn profile: %s (%d experience, %d education, %d skills)",
        profile.name,
        len(profile.experience),
        len(profile.education),
        len(profile.skills),
    )
    return profile


def _first(data: dict, *keys: str, default: str = "") -> str:
    """Return the first truthy value among keys."""
    for key in keys:
        value = data.get(key)
        if value:
            return value
    return default


def _skill_name(skill) -> str:
    if isinstance(skill, dict):
        return skill.get("name", "")
    return str(skill)


def normalize_profile_response(data: dict) -> ProfileData:
    """Map the API's loosely named fields onto ProfileData."""
    experience = [
        ExperienceEntry(
            title=_first(exp, "title"),
            company=_first(exp, "company", "companyName"),
            duration=_first(exp, "dateRange", "duration"),
            description=_first(exp, "description"),
        )
        for exp in (data.get("experience") or data.get("experiences") or [])
    ]

    education = [
        EducationEntry(
            school=_first(edu, "school", "schoolName"),
            degree=_first(edu, "degree"),
            duration=_first(edu, "dateRange", "duration"),
        )
        for edu in (data.get("education") or [])
    ]

    skills = [name for name in (_skill_name(s) for s in data.get("skills") or []) if name]

    return ProfileData(
        name=_first(data, "fullName", "name", default=UNKNOWN),
        headline=_first(data, "headline", "title"),
        location=_first(data, "location", default=UNKNOWN),
        profile_picture=_first(data, "profilePicture", "profilePic", "imageUrl"),
        about=_first(data, "about", "summary"),
        experience=experience,
        education=education,
        skills=skills,
    )
