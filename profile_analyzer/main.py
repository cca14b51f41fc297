"""CLI entry point for analyzing a LinkedIn profile."""

import argparse
import json
import logging
import sys
import traceback

import yaml

from profile_analyzer.analysis.models import ProfileAnalysis
from profile_analyzer.analyzer import analyze_profile
from profile_analyzer.config import AppConfig, load_config_or_default, validate_config
from profile_analyzer.storage.database import AnalysisDatabase
from profile_analyzer.utils.logging_config import setup_logging

logger = logging.getLogger("profile_analyzer")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Profile Analyzer - score a LinkedIn profile and get recruiter feedback",
    )
    parser.add_argument(
        "url", nargs="?",
        help="LinkedIn profile URL (https://www.linkedin.com/in/...)",
    )
    parser.add_argument(
        "--config", default="config.yaml",
        help="Path to config file (default: config.yaml)",
    )
    parser.add_argument(
        "--score-only", action="store_true",
        help="Compute the deterministic score without calling the LLM",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the full result as JSON",
    )
    parser.add_argument(
        "--no-save", action="store_true",
        help="Don't store the analysis in the history database",
    )
    parser.add_argument(
        "--stats", action="store_true",
        help="Print analysis history statistics and exit",
    )
    return parser.parse_args(argv)


def print_stats(db: AnalysisDatabase):
    """Print analysis history statistics."""
    stats = db.get_stats()
    print("\n=== Profile Analyzer Statistics ===")
    print(f"Total analyses: {stats['total_analyses']}")
    if stats["average_score"] is not None:
        print(f"Average overall score: {stats['average_score']}")

    if stats.get("last_analysis"):
        last = stats["last_analysis"]
        print(f"\nLast analysis: {last['created_at']}")
        print(f"  Profile: {last['name']} ({last['url']})")
        print(f"  Score: {last['overall_score']}/100")
    print()


def print_analysis(result: ProfileAnalysis):
    """Print a human-readable report."""
    profile, analysis = result.profile, result.analysis
    print("\n=== Profile ===")
    print(profile.to_summary_string())

    score = analysis.profile_score
    if score is not None:
        print(f"\nProfile Score: {score.overall}/100")
        for label, section in score.iter_sections():
            print(f"  {label:<12} {section.score:>3}/100  {section.reason}")

    print(f"\nSummary: {analysis.summary}")
    for title, items in (
        ("Strengths", analysis.strengths),
        ("Suggestions", analysis.suggestions),
        ("Career paths", analysis.career_paths),
    ):
        if items:
            print(f"\n{title}:")
            for item in items:
                print(f"  - {item}")
    if analysis.keywords:
        print(f"\nKeywords: {', '.join(analysis.keywords)}")
    print()


def run_analysis(config: AppConfig, url: str, score_only: bool = False,
                 as_json: bool = False, save: bool = True) -> ProfileAnalysis:
    """Analyze one profile, print it, and store it unless told not to."""
    result = analyze_profile(url, config, score_only=score_only)

    if as_json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_analysis(result)

    if save:
        with AnalysisDatabase(config.database_url) as db:
            analysis_id = db.save_analysis(url, result)
        logger.info("Analysis stored with id %d", analysis_id)

    return result


def main(argv: list[str] | None = None):
    args = parse_args(argv)

    try:
        config = load_config_or_default(args.config)
    except (OSError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(config.log_dir)

    for w in validate_config(config):
        logger.warning("Config: %s", w)

    # Handle --stats
    if args.stats:
        with AnalysisDatabase(config.database_url) as db:
            print_stats(db)
        return

    if not args.url:
        print("Error: a LinkedIn profile URL is required", file=sys.stderr)
        sys.exit(2)

    try:
        run_analysis(
            config,
            args.url,
            score_only=args.score_only,
            as_json=args.json,
            save=not args.no_save,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.error("Analysis failed: %s: %s\n%s", type(e).__name__, e, traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
