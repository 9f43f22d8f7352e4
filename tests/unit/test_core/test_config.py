"""Unit tests for core configuration module."""

import pytest
from pydantic import ValidationError

from drt_dashboard.core.config import Settings, get_settings


class TestSettings:
    """Tests for Settings configuration."""

    def test_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings load from environment variables."""
        monkeypatch.setenv("ANALYTICS_API_URL", "https://analytics.example.com/")
        monkeypatch.setenv("ANALYTICS_API_TIMEOUT", "2.5")
        monkeypatch.setenv("BOUNDARY_DISSOLVE", "true")
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.analytics_api_url == "https://analytics.example.com"
        assert settings.analytics_api_timeout == 2.5
        assert settings.boundary_dissolve is True

    def test_settings_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Default values are applied correctly."""
        for name in ("ANALYTICS_API_URL", "DEFAULT_ANALYSIS_MONTH", "TARGET_REGION", "LOG_LEVEL", "LOG_DIR"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.analytics_api_url == "http://localhost:8000"
        assert settings.analytics_api_timeout == 10.0
        assert settings.default_analysis_month == "2025-07-01"
        assert settings.target_region == "서울특별시"
        assert settings.boundary_dissolve is False
        assert settings.boundary_strict is False
        assert settings.log_level == "INFO"
        assert settings.log_dir is None

    def test_month_normalized(self) -> None:
        """A YYYY-MM month is stored in first-of-month form."""
        settings = Settings(_env_file=None, default_analysis_month="2025-03")  # type: ignore[call-arg]
        assert settings.default_analysis_month == "2025-03-01"

    def test_invalid_month_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Invalid analysis month"):
            Settings(_env_file=None, default_analysis_month="2025-03-15")  # type: ignore[call-arg]

    def test_url_scheme_required(self) -> None:
        with pytest.raises(ValidationError, match="http:// or https://"):
            Settings(_env_file=None, analytics_api_url="ftp://analytics")  # type: ignore[call-arg]

    def test_timeout_positive(self) -> None:
        """Timeout rejects zero and negative values."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, analytics_api_timeout=0)  # type: ignore[call-arg]

    def test_fixture_settings(self, settings: Settings) -> None:
        assert settings.analytics_api_url == "http://test-api:8000"
        assert settings.default_analysis_month == "2025-07-01"


class TestGetSettings:
    def test_returns_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TARGET_REGION", "부산광역시")
        assert get_settings().target_region == "부산광역시"
