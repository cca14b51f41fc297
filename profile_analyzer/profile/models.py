"""Profile data model."""

from dataclasses import dataclass, field

# Placeholder the scraper uses when the API gives no name or location
UNKNOWN = "Unknown"


@dataclass
class ExperienceEntry:
    title: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""


@dataclass
class EducationEntry:
    school: str = ""
    degree: str = ""
    duration: str = ""


@dataclass
class ProfileData:
    """Represents a scraped LinkedIn profile."""

    name: str = ""
    headline: str = ""
    location: str = ""
    profile_picture: str = ""
    about: str = ""
    experience: list[ExperienceEntry] = field(default_factory=list)
    education: list[EducationEntry] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)

    def to_summary_string(self) -> str:
        """Create a concise text summary for terminal output."""
        parts = []
        if self.name:
            parts.append(f"Name: {self.name}")
        if self.headline:
            parts.append(f"Headline: {self.headline}")
        if self.location:
            parts.append(f"Location: {self.location}")
        if self.experience:
            parts.append(f"Experience: {len(self.experience)} entries")
        if self.education:
            parts.append(f"Education: {len(self.education)} entries")
        if self.skills:
            parts.append(f"Skills: {', '.join(self.skills)}")
        if self.about:
            parts.append(f"About: {self.about[:500]}")
        return "\n".join(parts)

    def to_dict(self) -> dict:
        """Convert to the camelCase shape used by the API and stored records."""
        return {
            "name": self.name,
            "headline": self.headline,
            "location": self.location,
            "profilePicture": self.profile_picture,
            "about": self.about,
            "experience": [
                {
                    "title": exp.title,
                    "company": exp.company,
                    "duration": exp.duration,
                    "description": exp.description,
                }
                for exp in self.experience
            ],
            "education": [
                {"school": edu.school, "degree": edu.degree, "duration": edu.duration}
                for edu in self.education
            ],
            "skills": list(self.skills),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProfileData":
        return cls(
            name=data.get("name", ""),
            headline=data.get("headline", ""),
            location=data.get("location", ""),
            profile_picture=data.get("profilePicture", ""),
            about=data.get("about", ""),
            experience=[
                ExperienceEntry(
                    title=exp.get("title", ""),
                    company=exp.get("company", ""),
                    duration=exp.get("duration", ""),
                    description=exp.get("description", ""),
                )
                for exp in data.get("experience") or []
            ],
            education=[
                EducationEntry(
                    school=edu.get("school", ""),
                    degree=edu.get("degree", ""),
                    duration=edu.get("duration", ""),
                )
                for edu in data.get("education") or []
            ],
            skills=list(data.get("skills") or []),
        )
