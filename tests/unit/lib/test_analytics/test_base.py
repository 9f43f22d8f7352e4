"""Unit tests for analytics client shared types."""

import pytest

from drt_dashboard.lib.analytics.base import DEFAULT_ANALYSIS_MONTH, AnalyticsApiError, normalize_analysis_month


class TestNormalizeAnalysisMonth:
    """Tests for analysis month normalization."""

    def test_year_month_gets_first_day(self) -> None:
        assert normalize_analysis_month("2025-07") == "2025-07-01"

    def test_first_day_kept(self) -> None:
        assert normalize_analysis_month("2025-07-01") == "2025-07-01"

    def test_none_uses_default(self) -> None:
        assert normalize_analysis_month(None) == DEFAULT_ANALYSIS_MONTH

    def test_none_uses_given_default(self) -> None:
        assert normalize_analysis_month(None, "2024-12") == "2024-12-01"

    @pytest.mark.parametrize("month", ["2025-07-15", "2025-13", "2025-7", "July 2025", "", "2025-01-011"])
    def test_invalid_month_raises(self, month: str) -> None:
        with pytest.raises(ValueError, match="Invalid analysis month"):
            normalize_analysis_month(month)

    def test_day_containing_01_is_rejected(self) -> None:
        """A date like 2025-01-15 contains '-01' but is not a month start."""
        with pytest.raises(ValueError, match="Invalid analysis month"):
            normalize_analysis_month("2025-01-15")


class TestAnalyticsApiError:
    def test_attributes(self) -> None:
        err = AnalyticsApiError("/api/v1/traffic/hourly", "Backend returned HTTP 503", 503)

        assert err.endpoint == "/api/v1/traffic/hourly"
        assert err.message == "Backend returned HTTP 503"
        assert err.status_code == 503
        assert str(err) == "/api/v1/traffic/hourly: Backend returned HTTP 503"

    def test_status_code_optional(self) -> None:
        assert AnalyticsApiError("/x", "Request timed out").status_code is None
