"""Tests for the problem-pipeline CLI."""

from unittest.mock import patch

from typer.testing import CliRunner

from problem_pipeline import __version__
from problem_pipeline.cli import app


runner = CliRunner()


class TestVersion:
    """Tests for the --version option."""

    def test_version_flag(self) -> None:
        """Verify --version prints the package version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestServeCommand:
    """Tests for problem-pipeline serve."""

    def test_serve_runs_app_factory(self) -> None:
        """Verify serve hands the app factory to uvicorn."""
        with patch("problem_pipeline.cli.uvicorn.run") as run:
            result = runner.invoke(app, ["serve", "--port", "9001"])

        assert result.exit_code == 0
        run.assert_called_once_with(
            "problem_pipeline.main:create_app",
            factory=True,
            host="127.0.0.1",
            port=9001,
            reload=False,
        )

    def test_serve_reports_diagnostics_mode(self, monkeypatch) -> None:
        """Verify serve prints whether diagnostics are enabled."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("DIAGNOSTICS", "false")
        from problem_pipeline.config import get_settings

        get_settings.cache_clear()
        try:
            with patch("problem_pipeline.cli.uvicorn.run"):
                result = runner.invoke(app, ["serve"])
        finally:
            get_settings.cache_clear()

        assert result.exit_code == 0
        assert "diagnostics off" in result.stdout
