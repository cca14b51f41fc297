"""OpenAI narrative analysis of a scored profile."""

import logging

from openai import OpenAI, OpenAIError

from profile_analyzer.analysis.models import AnalysisResult
from profile_analyzer.analysis.parser import parse_analysis_response
from profile_analyzer.analysis.prompts import SYSTEM_PROMPT, build_analysis_prompt
from profile_analyzer.config import LLMConfig
from profile_analyzer.profile.models import ProfileData
from profile_analyzer.scoring.models import ProfileScore
from profile_analyzer.scoring.seed import generate_seed
from profile_analyzer.utils.exceptions import AnalysisError

logger = logging.getLogger("profile_analyzer.analysis.llm")


def generate_analysis(
    profile: ProfileData,
    profile_score: ProfileScore,
    api_key: str,
    llm: LLMConfig | None = None,
    client: OpenAI | None = None,
) -> AnalysisResult:
    """Ask the model for a recruiter-style analysis consistent with the score.

    The prompt embeds the score, and the seed comes from the profile itself so
    repeated runs on the same profile ask for the same output. One attempt;
    failures are raised as AnalysisError.
    """
    llm = llm or LLMConfig()

    if client is None:
        if not api_key:
            logger.error("OPENAI_API_KEY environment variable is not set")
            raise AnalysisError("OPENAI_API_KEY environment variable is not set")
        client = OpenAI(api_key=api_key)

    seed = generate_seed(profile)
    logger.info("Requesting analysis for '%s' (model=%s, seed=%d)", profile.name, llm.model, seed)

    try:
        response = client.chat.completions.create(
            model=llm.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_analysis_prompt(profile, profile_score)},
            ],
            temperature=llm.temperature,
            max_tokens=llm.max_tokens,
            seed=seed,
            response_format={"type": "json_object"},
        )
        content = response.choices[0].message.content or ""
    except (OpenAIError, IndexError, AttributeError) as e:
        logger.error("Error generating analysis: %s", e)
        raise AnalysisError(f"Failed to generate analysis: {e}") from e

    return parse_analysis_response(content, profile_score)
