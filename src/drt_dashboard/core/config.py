"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from drt_dashboard.lib.analytics.base import normalize_analysis_month


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Analytics backend
    analytics_api_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the DRT analytics backend",
    )
    analytics_api_timeout: float = Field(
        default=10.0,
        description="Analytics backend request timeout in seconds",
        gt=0,
    )
    default_analysis_month: str = Field(
        default="2025-07-01",
        description="Analysis month used when a request does not name one (YYYY-MM or YYYY-MM-01)",
    )

    @field_validator("analytics_api_url")
    @classmethod
    def validate_analytics_api_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            msg = "analytics_api_url must start with http:// or https://"
            raise ValueError(msg)
        return v.rstrip("/")

    @field_validator("default_analysis_month")
    @classmethod
    def validate_default_analysis_month(cls, v: str) -> str:
        return normalize_analysis_month(v)

    # District boundaries
    target_region: str = Field(
        default="서울특별시",
        description="Top-level region (sidonm) whose districts are extracted",
    )
    boundary_file: str = Field(
        default="./reference/HangJeongDong_ver20250401.geojson",
        description="Administrative-subdivision boundary dataset (.geojson, .json or .shp)",
    )
    boundary_dissolve: bool = Field(
        default=False,
        description="Union each district's sub-region polygons instead of concatenating them",
    )
    boundary_strict: bool = Field(
        default=False,
        description="Fail extraction on unsupported geometry instead of skipping it",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for rotating log files (unset disables file logging)",
    )


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
