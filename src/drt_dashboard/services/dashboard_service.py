"""Dashboard service — summary cards, rankings and pattern feeds built from backend data."""

import math

from loguru import logger

from drt_dashboard.lib.analytics import CITY_WIDE, AnalyticsApiError, AnalyticsClient
from drt_dashboard.lib.districts import resolve_district_name
from drt_dashboard.schemas.dashboard import (
    AnomalyPattern,
    DashboardSummary,
    HeatmapOverview,
    StationDrtRanking,
    TopDistrict,
    TopStation,
)

# Days used to turn monthly totals into a daily average
DAYS_PER_MONTH = 30

# District shown when a district-only view is opened city-wide
FALLBACK_DISTRICT = "강남구"

CITY_WIDE_LABEL = "서울시 전체"

# Component weights of the composite DRT score
DEMAND_WEIGHT = 0.3
ACCESSIBILITY_WEIGHT = 0.3
EFFICIENCY_WEIGHT = 0.4


def _district_or_fallback(district: str | None) -> str:
    if not district or district == CITY_WIDE:
        return FALLBACK_DISTRICT
    return resolve_district_name(district)


def drt_recommendation(score: float) -> str:
    """Map a DRT score to its priority label."""
    if score > 80:
        return "높은 DRT 우선순위"
    if score > 60:
        return "중간 DRT 우선순위"
    return "낮은 DRT 우선순위"


def pattern_severity(index: int) -> str:
    """Severity of the ``index``-th ranked pattern: two high, two medium, then low."""
    if index < 2:
        return "high"
    if index < 4:
        return "medium"
    return "low"


async def get_dashboard_summary(
    client: AnalyticsClient, district: str | None = None, month: str | None = None
) -> DashboardSummary:
    """Headline numbers for the dashboard overview cards.

    Raises:
        AnalyticsApiError: If the traffic request fails.
    """
    traffic = await client.get_traffic_patterns(district, month)
    total = traffic.total_passengers

    return DashboardSummary(
        total_passengers=total,
        daily_average=math.floor(total / DAYS_PER_MONTH + 0.5),
        peak_hour_traffic=traffic.peak_hours.weekday_morning_peak.avg_total_passengers,
        weekday_weekend_ratio=traffic.weekday_weekend_ratio,
        top_district=traffic.district_name or CITY_WIDE_LABEL,
    )


async def get_heatmap_overview(client: AnalyticsClient, month: str | None = None, top_n: int = 5) -> HeatmapOverview:
    """Top districts (in backend order) and top stations city-wide.

    Raises:
        AnalyticsApiError: If the heatmap request fails.
    """
    heatmap = await client.get_seoul_heatmap(month, include_station_details=True)

    top_districts = [
        TopDistrict(
            district_name=d.district_name,
            total_traffic=d.total_traffic,
            rank=i + 1,
            traffic_density=d.traffic_density or 0,
            station_count=d.station_count,
        )
        for i, d in enumerate(heatmap.districts[:top_n])
    ]

    stations = [(station, d.district_name) for d in heatmap.districts for station in d.stations]
    stations.sort(key=lambda pair: pair[0].total_traffic, reverse=True)
    top_stations = [
        TopStation(
            station_name=station.station_name,
            total_traffic=station.total_traffic,
            daily_average=station.daily_average,
            district=district_name,
        )
        for station, district_name in stations[:top_n]
    ]

    return HeatmapOverview(top_districts=top_districts, top_stations=top_stations)


async def get_station_drt_rankings(
    client: AnalyticsClient, district: str | None = None, month: str | None = None, model_type: str = "commuter"
) -> list[StationDrtRanking]:
    """Top DRT stations of a district with the score split into components.

    Returns an empty list when the backend request fails.
    """
    district_name = _district_or_fallback(district)
    try:
        response = await client.get_district_drt_scores(district_name, model_type, month)
    except AnalyticsApiError as e:
        logger.warning(f"DRT scores unavailable for {district_name}: {e}")
        return []

    return [
        StationDrtRanking(
            station_id=station.station_id,
            station_name=station.station_name,
            district=response.district_name,
            drt_score=station.drt_score,
            demand_score=station.drt_score * DEMAND_WEIGHT,
            accessibility_score=station.drt_score * ACCESSIBILITY_WEIGHT,
            efficiency_score=station.drt_score * EFFICIENCY_WEIGHT,
            recommendation=drt_recommendation(station.drt_score),
        )
        for station in response.top_stations
    ]


async def get_anomaly_patterns(
    client: AnalyticsClient, district: str | None = None, month: str | None = None
) -> list[AnomalyPattern]:
    """Weekend-dominant stations of a district as ranked anomaly records.

    Returns an empty list when the backend request fails.
    """
    district_name = _district_or_fallback(district)
    try:
        response = await client.get_integrated_anomaly_patterns(district_name, month)
    except AnalyticsApiError as e:
        logger.warning(f"Anomaly patterns unavailable for {district_name}: {e}")
        return []

    data = response.data
    return [
        AnomalyPattern(
            pattern_id=i + 1,
            station_name=item.station.station_name,
            district=item.station.district_name,
            anomaly_score=item.weekend_total_traffic,
            pattern_description="주말 고수요 정류장",
            detected_at=data.generated_at,
            severity=pattern_severity(i),
        )
        for i, item in enumerate(data.weekend_dominant_stations)
    ]
