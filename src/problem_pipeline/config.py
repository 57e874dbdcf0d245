"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from problem_pipeline.core.constants import CORRELATION_ID_HEADER, ENVIRONMENTS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Problem Pipeline"
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # Error responses
    diagnostics: bool | None = None
    correlation_header: str = CORRELATION_ID_HEADER

    # Observability
    log_level: str = "INFO"

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Normalize and check the deployment environment name.

        Raises:
            ValueError: If the environment is not a known name
        """
        v = v.strip().lower()
        if v not in ENVIRONMENTS:
            raise ValueError(
                f"ENVIRONMENT must be one of: {', '.join(sorted(ENVIRONMENTS))}"
            )
        return v

    @field_validator("correlation_header")
    @classmethod
    def validate_correlation_header(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("CORRELATION_HEADER must not be empty")
        return v.strip()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def diagnostics_enabled(self) -> bool:
        """Whether error responses carry exception diagnostics.

        An explicit ``DIAGNOSTICS`` value wins; otherwise diagnostics follow
        the development environment.
        """
        if self.diagnostics is not None:
            return self.diagnostics
        return self.is_development


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
