"""Shared test fixtures for boundary datasets, settings and backend payloads."""

import json
from pathlib import Path

import pytest

from drt_dashboard.core.config import Settings
from tests.helpers import make_feature, square_at


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        _env_file=None,
        analytics_api_url="http://test-api:8000",
        analytics_api_timeout=5.0,
        default_analysis_month="2025-07",
    )


@pytest.fixture
def dong_collection() -> dict:
    """Two Seoul districts split across dongs, plus one Gyeonggi feature."""
    return {
        "type": "FeatureCollection",
        "features": [
            make_feature("11110", "종로구", coordinates=square_at(0)),
            make_feature("11140", "중구", coordinates=square_at(5)),
            make_feature(
                "11110",
                "종로구",
                geometry_type="MultiPolygon",
                coordinates=[square_at(1), square_at(2)],
            ),
            make_feature("41111", "수원시장안구", region="경기도", coordinates=square_at(9)),
            make_feature("11140", "중구", coordinates=square_at(6)),
        ],
    }


@pytest.fixture
def dong_geojson_file(tmp_path: Path, dong_collection: dict) -> Path:
    """The dong collection written to a .geojson file."""
    f = tmp_path / "HangJeongDong.geojson"
    f.write_text(json.dumps(dong_collection, ensure_ascii=False), encoding="utf-8")
    return f


@pytest.fixture
def hourly_traffic_payload() -> dict:
    """A ``/api/v1/traffic/hourly`` response for 강남구."""
    pattern = {"hour": 8, "avg_ride_passengers": 100.0, "avg_alight_passengers": 80.0, "avg_total_passengers": 180.0}
    return {
        "analysis_month": "2025-07-01",
        "region_type": "district",
        "region_name": "강남구",
        "district_name": "강남구",
        "weekday_patterns": [pattern],
        "weekend_patterns": [pattern],
        "peak_hours": {
            "weekday_morning_peak": {"hour": 8, "avg_total_passengers": 5230.5},
            "weekday_evening_peak": {"hour": 18, "avg_total_passengers": 4890.0},
            "weekend_peak": {"hour": 14, "avg_total_passengers": 2100.0},
        },
        "total_weekday_passengers": 2400000,
        "total_weekend_passengers": 600000,
        "weekday_weekend_ratio": 4.0,
    }

