"""YAML config loading and validation."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_DATABASE_URL = "sqlite:///data/profile_analyzer.db"


@dataclass
class ApiKeys:
    rapidapi_key: str = ""
    openai_api_key: str = ""


@dataclass
class ScraperConfig:
    api_host: str = "linkedin-data-api.p.rapidapi.com"
    timeout: int = 30


@dataclass
class LLMConfig:
    model: str = "gpt-4o"
    temperature: float = 0.2
    max_tokens: int = 1000


@dataclass
class AppConfig:
    api_keys: ApiKeys = field(default_factory=ApiKeys)
    scraper: ScraperConfig = field(default_factory=ScraperConfig)
    llm: LLMConfig = field(default_factory=LLMConfig)
    database_url: str = DEFAULT_DATABASE_URL
    log_dir: str = "logs"


def _build_config(raw: dict) -> AppConfig:
    config = AppConfig()

    # API keys (env vars take precedence)
    keys_raw = raw.get("api_keys", {})
    config.api_keys = ApiKeys(
        rapidapi_key=os.environ.get("RAPID_API_KEY", keys_raw.get("rapidapi_key", "")),
        openai_api_key=os.environ.get("OPENAI_API_KEY", keys_raw.get("openai_api_key", "")),
    )

    # Scraper
    scraper_raw = raw.get("scraper", {})
    config.scraper = ScraperConfig(
        api_host=scraper_raw.get("api_host", "linkedin-data-api.p.rapidapi.com"),
        timeout=scraper_raw.get("timeout", 30),
    )

    # LLM
    llm_raw = raw.get("llm", {})
    config.llm = LLMConfig(
        model=os.environ.get("OPENAI_MODEL", llm_raw.get("model", "gpt-4o")),
        temperature=llm_raw.get("temperature", 0.2),
        max_tokens=llm_raw.get("max_tokens", 1000),
    )

    config.database_url = os.environ.get("DATABASE_URL", raw.get("database_url", DEFAULT_DATABASE_URL))
    config.log_dir = raw.get("log_dir", "logs")

    return config


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load and validate configuration from YAML file."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Copy config.example.yaml to config.yaml and fill in your settings."
        )

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _build_config(raw)


def load_config_or_default(config_path: str = "config.yaml") -> AppConfig:
    """Like load_config, but fall back to env-only settings when the file is absent."""
    if Path(config_path).exists():
        return load_config(config_path)
    return _build_config({})


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    warnings = []

    if not config.api_keys.rapidapi_key:
        warnings.append("No RapidAPI key configured - LinkedIn scraping will fail")

    if not config.api_keys.openai_api_key:
        warnings.append("No OpenAI API key configured - only score-only analysis is available")

    if not 0.0 <= config.llm.temperature <= 2.0:
        warnings.append(f"LLM temperature {config.llm.temperature} is outside the 0.0-2.0 range")

    if config.scraper.timeout <= 0:
        warnings.append("Scraper timeout must be positive")

    return warnings
