"""Deterministic seed for the LLM call."""

import struct

from profile_analyzer.profile.models import ProfileData


def seed_source(profile: ProfileData) -> str:
    """Canonical string the seed is derived from."""
    return (
        f"{profile.name}|{profile.headline}|{profile.location}"
        f"|{len(profile.experience)}|{len(profile.skills)}"
    )


def _utf16_code_units(text: str):
    data = text.encode("utf-16-le")
    return struct.unpack(f"<{len(data) // 2}H", data)


def string_hash(text: str) -> int:
    """31-multiplier rolling hash over UTF-16 code units, as a signed 32-bit int."""
    value = 0
    for code_unit in _utf16_code_units(text):
        value = (value * 31 + code_unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def generate_seed(profile: ProfileData) -> int:
    """Return a non-negative seed that is stable for the same profile.

    Only name, headline, location and the experience/skill counts feed the
    hash, so two profiles sharing those collapse to the same seed.
    """
    return abs(string_hash(seed_source(profile)))
