"""Prompt text for the profile analysis call."""

from profile_analyzer.profile.models import ProfileData
from profile_analyzer.scoring.models import ProfileScore

SYSTEM_PROMPT = (
    "You are a professional recruiter and marketing expert specializing in talent acquisition "
    "with 15+ years of experience. Provide detailed, actionable insights focused on how this "
    "candidate would be perceived by hiring managers and marketing teams. Analyze their core "
    "strengths, unique selling points, and career trajectory. Identify specific improvements "
    "that would increase profile visibility to recruiters and highlight the most marketable "
    "aspects of their experience and skills. Be consistent in your scoring and evaluation - "
    "the same profile should always receive the same analysis and score. IMPORTANT: Your "
    "response MUST follow this exact JSON structure:\n"
    "{\n"
    '  "summary": "Concise professional summary (2-3 sentences)",\n'
    '  "strengths": ["Strength 1 with brief explanation", "Strength 2 with brief explanation", '
    '"Strength 3 with brief explanation", "Strength 4 with brief explanation"],\n'
    '  "suggestions": ["Specific suggestion 1", "Specific suggestion 2", "Specific suggestion 3"],\n'
    '  "keywords": ["keyword1", "keyword2", "keyword3", "keyword4", "keyword5", "keyword6"],\n'
    '  "careerPaths": ["Career path 1", "Career path 2", "Career path 3"]\n'
    "}"
)

REQUESTED_OUTPUT = """\
Please provide:
1. A concise professional summary highlighting marketable skills and potential fit for roles (2-3 sentences)
2. 4-5 key strengths that would appeal to recruiters and marketing teams, with brief explanation of each
3. 3-4 specific, actionable suggestions to improve the profile for better visibility to recruiters
4. 6-8 relevant industry keywords/skills that would make this profile stand out in recruitment searches
5. 2-3 potential career paths or roles this candidate would be well-suited for

Base your analysis ONLY on the data provided. If a section has insufficient data, acknowledge this in your analysis."""


def format_score_block(score: ProfileScore) -> str:
    """Render the score as the labeled block embedded in the prompt."""
    lines = [f"Profile Score: {score.overall}/100", "Section Scores:"]
    for label, section in score.iter_sections():
        lines.append(f"- {label}: {section.score}/100 ({section.reason})")
    return "\n".join(lines)


def build_analysis_prompt(profile: ProfileData, score: ProfileScore) -> str:
    experience = "\n\n".join(
        f"- {exp.title} at {exp.company} ({exp.duration})\n  {exp.description}"
        for exp in profile.experience
    )
    education = "\n".join(
        f"- {edu.degree} at {edu.school} ({edu.duration})" for edu in profile.education
    )

    return (
        "Perform a detailed analysis of the following LinkedIn profile from a marketing and "
        "recruitment perspective. Use the provided section scores to ensure consistency in "
        "your analysis:\n\n"
        f"Name: {profile.name}\n"
        f"Headline: {profile.headline}\n"
        f"Location: {profile.location}\n"
        f"About: {profile.about}\n\n"
        f"Experience:\n{experience}\n\n"
        f"Education:\n{education}\n\n"
        f"Skills:\n{', '.join(profile.skills)}\n\n"
        f"{format_score_block(score)}\n\n"
        f"{REQUESTED_OUTPUT}"
    )
