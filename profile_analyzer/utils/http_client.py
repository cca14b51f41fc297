"""HTTP client for the RapidAPI scraping endpoint."""

import logging
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from profile_analyzer.utils.exceptions import ScrapeError

logger = logging.getLogger("profile_analyzer.http")

USER_AGENT = "profile-analyzer/0.1"


def create_session(api_key: str, api_host: str, max_retries: int = 0) -> requests.Session:
    """Create a requests session carrying the RapidAPI auth headers.

    Retries default to zero: each scrape is a single attempt.
    """
    session = requests.Session()

    retry_strategy = Retry(
        total=max_retries,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"],
        raise_on_status=False,
    )

    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
        "X-RapidAPI-Key": api_key,
        "X-RapidAPI-Host": api_host,
    })

    return session


def get_json(
    url: str,
    session: requests.Session,
    timeout: int = 30,
    params: Optional[dict] = None,
) -> dict:
    """GET a JSON document, raising ScrapeError on transport or HTTP errors."""
    try:
        response = session.get(url, params=params, timeout=timeout)
    except requests.RequestException as e:
        logger.warning("HTTP request failed for %s: %s", url, e)
        raise ScrapeError(f"LinkedIn scraping failed: {e}") from e

    if not response.ok:
        logger.warning("HTTP %d from %s", response.status_code, url)
        raise ScrapeError(f"LinkedIn scraping failed: {response.status_code} {response.text}")

    try:
        return response.json()
    except ValueError as e:
        raise ScrapeError(f"LinkedIn scraping returned invalid JSON: {e}") from e
