"""Tests for the command-line entry point."""

import json
import logging

import pytest

from profile_analyzer import main as cli
from profile_analyzer.analysis.models import AnalysisResult, ProfileAnalysis
from profile_analyzer.profile.models import ProfileData
from profile_analyzer.scoring.scorer import calculate_profile_score

PROFILE_URL = "https://www.linkedin.com/in/jane-doe"


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.getLogger("profile_analyzer").handlers.clear()


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    path = tmp_path / "config.yaml"
    path.write_text(
        f"database_url: sqlite:///{tmp_path / 'cli.db'}\n"
        "log_dir: ''\n",
        encoding="utf-8",
    )
    return str(path)


@pytest.fixture
def stub_analysis(monkeypatch):
    def fake_analyze(url, config, score_only=False):
        profile = ProfileData(name="Jane Doe", headline="Senior Product Manager")
        analysis = AnalysisResult(
            summary="Strong PM",
            strengths=["Roadmaps"],
            keywords=["product", "agile"],
            profile_score=calculate_profile_score(profile),
        )
        return ProfileAnalysis(profile=profile, analysis=analysis)

    monkeypatch.setattr(cli, "analyze_profile", fake_analyze)


class TestParseArgs:
    def test_defaults(self):
        args = cli.parse_args([PROFILE_URL])
        assert args.url == PROFILE_URL
        assert args.config == "config.yaml"
        assert not args.score_only
        assert not args.json
        assert not args.no_save

    def test_flags(self):
        args = cli.parse_args(["--score-only", "--json", "--no-save", PROFILE_URL])
        assert args.score_only and args.json and args.no_save


class TestMain:
    def test_report_output(self, config_path, stub_analysis, capsys):
        cli.main([PROFILE_URL, "--config", config_path, "--no-save"])
        out = capsys.readouterr().out
        assert "Name: Jane Doe" in out
        assert "Headline: Senior Product Manager" in out
        assert "Profile Score:" in out
        assert "Summary: Strong PM" in out
        assert "Keywords: product, agile" in out

    def test_json_output(self, config_path, stub_analysis, capsys):
        cli.main([PROFILE_URL, "--config", config_path, "--json", "--no-save"])
        data = json.loads(capsys.readouterr().out)
        assert data["analysis"]["summary"] == "Strong PM"

    def test_saved_analysis_shows_in_stats(self, config_path, stub_analysis, capsys):
        cli.main([PROFILE_URL, "--config", config_path, "--json"])
        capsys.readouterr()

        cli.main(["--stats", "--config", config_path])
        out = capsys.readouterr().out
        assert "Total analyses: 1" in out
        assert PROFILE_URL in out

    def test_missing_url_exits(self, config_path):
        with pytest.raises(SystemExit) as exc:
            cli.main(["--config", config_path])
        assert exc.value.code == 2

    def test_invalid_url_exits(self, config_path, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["https://example.com/jane", "--config", config_path, "--no-save"])
        assert exc.value.code == 1
        assert "Invalid LinkedIn profile URL" in capsys.readouterr().err
