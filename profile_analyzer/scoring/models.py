"""Score data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SectionScore:
    """A 0-100 rating of one profile section plus its justification."""

    score: int
    reason: str

    def to_dict(self) -> dict:
        return {"score": self.score, "reason": self.reason}

    @classmethod
    def from_dict(cls, data: dict) -> "SectionScore":
        return cls(score=int(data.get("score", 0)), reason=str(data.get("reason", "")))


@dataclass(frozen=True)
class ProfileSections:
    basic_info: SectionScore
    experience: SectionScore
    skills: SectionScore
    education: SectionScore
    keywords: SectionScore


# (attribute, wire key, display label) in prompt/display order
SECTION_FIELDS = (
    ("basic_info", "basicInfo", "Basic Info"),
    ("experience", "experience", "Experience"),
    ("skills", "skills", "Skills"),
    ("education", "education", "Education"),
    ("keywords", "keywords", "Keywords"),
)


@dataclass(frozen=True)
class ProfileScore:
    """Weighted overall score with the per-section breakdown."""

    overall: int
    sections: ProfileSections

    def iter_sections(self):
        """Yield (label, SectionScore) pairs in display order."""
        for attr, _, label in SECTION_FIELDS:
            yield label, getattr(self.sections, attr)

    def to_dict(self) -> dict:
        """Convert to the nested shape stored with each analysis record."""
        return {
            "overall": self.overall,
            "sections": {
                key: getattr(self.sections, attr).to_dict()
                for attr, key, _ in SECTION_FIELDS
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProfileScore":
        raw_sections = data.get("sections", {})
        sections = ProfileSections(**{
            attr: SectionScore.from_dict(raw_sections.get(key, {}))
            for attr, key, _ in SECTION_FIELDS
        })
        return cls(overall=int(data.get("overall", 0)), sections=sections)
