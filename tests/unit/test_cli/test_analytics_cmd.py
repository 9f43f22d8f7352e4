"""Unit tests for the analytics CLI commands."""

from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from drt_dashboard.cli.app import app
from drt_dashboard.lib.analytics import AnalyticsApiError
from drt_dashboard.schemas.dashboard import DashboardSummary, DistrictSelection, StationDrtRanking

runner = CliRunner()


class TestDistrictCommand:
    def test_prints_selection(self) -> None:
        selection = DistrictSelection(
            district_id="gangnam", district_name="강남구", total_passengers=3_000_000, peak_hour=8
        )
        with patch(
            "drt_dashboard.services.district_map_service.select_district",
            new_callable=AsyncMock,
            return_value=selection,
        ) as mock_select:
            result = runner.invoke(app, ["analytics", "district", "강남구", "--month", "2025-06"])

        assert result.exit_code == 0
        assert "강남구 (gangnam)" in result.output
        assert "3,000,000" in result.output
        assert "08:00" in result.output
        assert mock_select.await_args.args[1:] == ("강남구", "2025-06")

    def test_backend_error_exits_1(self) -> None:
        with patch(
            "drt_dashboard.services.district_map_service.select_district",
            new_callable=AsyncMock,
            side_effect=AnalyticsApiError("/api/v1/traffic/hourly", "Request timed out"),
        ):
            result = runner.invoke(app, ["analytics", "district", "강남구"])

        assert result.exit_code == 1
        assert "Request timed out" in result.output


class TestSummaryCommand:
    def test_prints_summary(self) -> None:
        summary = DashboardSummary(
            total_passengers=3_000_000,
            daily_average=100_000,
            peak_hour_traffic=5230.5,
            weekday_weekend_ratio=4.0,
            top_district="강남구",
        )
        with patch(
            "drt_dashboard.services.dashboard_service.get_dashboard_summary",
            new_callable=AsyncMock,
            return_value=summary,
        ):
            result = runner.invoke(app, ["analytics", "summary", "--district", "gangnam"])

        assert result.exit_code == 0
        assert "Summary: 강남구" in result.output
        assert "100,000" in result.output
        assert "4.00" in result.output

    def test_invalid_month_exits_1(self) -> None:
        result = runner.invoke(app, ["analytics", "summary", "--month", "2025-07-15"])

        assert result.exit_code == 1
        assert "Invalid analysis month" in result.output


class TestDrtRankingsCommand:
    def test_prints_rankings(self) -> None:
        ranking = StationDrtRanking(
            station_id="1",
            station_name="홍대입구역",
            district="마포구",
            drt_score=90.0,
            demand_score=27.0,
            accessibility_score=27.0,
            efficiency_score=36.0,
            recommendation="높은 DRT 우선순위",
        )
        with patch(
            "drt_dashboard.services.dashboard_service.get_station_drt_rankings",
            new_callable=AsyncMock,
            return_value=[ranking],
        ):
            result = runner.invoke(app, ["analytics", "drt-rankings", "--district", "mapo"])

        assert result.exit_code == 0
        assert "홍대입구역" in result.output
        assert "90.0" in result.output

    def test_empty_rankings(self) -> None:
        with patch(
            "drt_dashboard.services.dashboard_service.get_station_drt_rankings",
            new_callable=AsyncMock,
            return_value=[],
        ):
            result = runner.invoke(app, ["analytics", "drt-rankings"])

        assert result.exit_code == 0
        assert "No DRT scores available" in result.output

    def test_invalid_model_exits_1(self) -> None:
        result = runner.invoke(app, ["analytics", "drt-rankings", "--model", "express"])

        assert result.exit_code == 1
        assert "Invalid DRT model type" in result.output
