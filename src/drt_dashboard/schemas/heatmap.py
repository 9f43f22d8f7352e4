"""Pydantic v2 schemas for the traffic heatmap endpoints."""

from pydantic import BaseModel, Field

from drt_dashboard.schemas.common import Boundary, Coordinate


class StationTraffic(BaseModel):
    """Monthly traffic totals for one bus stop."""

    station_id: str
    station_name: str
    coordinate: Coordinate
    total_traffic: int
    total_ride: int
    total_alight: int
    daily_average: float


class DistrictTraffic(BaseModel):
    """Monthly traffic totals for one district, with its stops."""

    district_code: str
    district_name: str
    boundary: Boundary
    total_traffic: int
    total_ride: int
    total_alight: int
    daily_average: float
    station_count: int
    stations: list[StationTraffic] = Field(default_factory=list)
    traffic_rank: int
    traffic_density: float | None = None


class HeatmapStatistics(BaseModel):
    max_district_traffic: int
    min_district_traffic: int
    max_station_traffic: int
    min_station_traffic: int
    total_seoul_traffic: int
    total_stations: int
    district_traffic_quartiles: list[float]
    station_traffic_quartiles: list[float]


class SeoulHeatmapResponse(BaseModel):
    """Response of ``/api/v1/heatmap/seoul``."""

    analysis_month: str
    seoul_boundary: Boundary
    districts: list[DistrictTraffic]
    statistics: HeatmapStatistics
    data_period: str
    last_updated: str


class HeatmapStatisticsPayload(BaseModel):
    """``data`` member of the heatmap statistics envelope."""

    statistics: HeatmapStatistics
    processing_time_ms: float
