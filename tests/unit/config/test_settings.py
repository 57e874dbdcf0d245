"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from problem_pipeline.config import Settings


def make_settings(**overrides):
    return Settings(_env_file=None, **overrides)


class TestDiagnosticsEnabled:
    """Tests for the diagnostic mode flag."""

    @pytest.mark.parametrize(
        ("environment", "expected"),
        [("development", True), ("staging", False), ("production", False)],
    )
    def test_follows_environment(self, environment, expected):
        assert make_settings(environment=environment).diagnostics_enabled is expected

    def test_explicit_override_wins(self):
        settings = make_settings(environment="production", diagnostics=True)
        assert settings.diagnostics_enabled
        assert not make_settings(
            environment="development", diagnostics=False
        ).diagnostics_enabled

    def test_reads_environment_variables(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "Production")
        monkeypatch.setenv("DIAGNOSTICS", "true")

        settings = make_settings()

        assert settings.is_production
        assert settings.diagnostics_enabled


class TestValidation:
    """Tests for settings validation."""

    def test_unknown_environment_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(environment="qa")

    def test_blank_correlation_header_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(correlation_header="  ")
