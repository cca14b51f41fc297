"""Keyword vocabulary, corpus building, and list extraction utilities."""

import re

from profile_analyzer.profile.models import ProfileData

# Common professional/industry terms checked by the keyword density score
INDUSTRY_KEYWORDS = (
    # Leadership & strategy
    "leadership", "management", "strategy", "innovation", "development",
    "analysis", "research", "design", "marketing", "sales", "operations",
    "project", "product", "service", "customer", "client",
    # Collaboration
    "team", "collaboration", "communication", "presentation", "negotiation",
    # Execution
    "budget", "planning", "implementation", "execution", "evaluation",
    "assessment", "improvement", "optimization", "efficiency",
    "effectiveness", "performance", "results", "achievement", "success",
    # Scope
    "growth", "expansion", "scaling", "global", "international", "national",
    "regional", "local", "industry", "market", "sector", "niche",
    # Proficiency
    "specialized", "expert", "professional", "certified", "qualified",
    "experienced", "skilled", "competent", "proficient", "adept",
)

LIST_ITEM_PATTERN = re.compile(r"^[-\d*].+")
LIST_MARKER_PATTERN = re.compile(r"^(?:[-*]|\d+[.)]?)\s*")


def build_keyword_corpus(profile: ProfileData) -> str:
    """Lowercase text of headline, about, experience titles/descriptions and skills."""
    parts = [profile.headline or "", profile.about or ""]
    parts.extend(f"{exp.title} {exp.description}" for exp in profile.experience)
    parts.extend(profile.skills)
    return " ".join(parts).lower()


def count_keyword_matches(text: str, keywords=INDUSTRY_KEYWORDS) -> int:
    """Count keywords that appear anywhere in text (plain substring match)."""
    text_lower = text.lower()
    return sum(1 for keyword in keywords if keyword in text_lower)


def extract_list_items(text: str | None) -> list[str]:
    """Pull bullet or numbered lines out of a block of text, markers stripped."""
    if not text:
        return []
    items = []
    for line in text.split("\n"):
        line = line.strip()
        if LIST_ITEM_PATTERN.match(line):
            items.append(LIST_MARKER_PATTERN.sub("", line, count=1))
    return items


def split_keywords(text: str | None) -> list[str]:
    """Split a comma or newline separated block into trimmed keywords."""
    if not text:
        return []
    return [kw.strip() for kw in re.split(r"[,\n]", text) if kw.strip()]
