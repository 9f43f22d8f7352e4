"""Pydantic v2 schemas for the dashboard views assembled from backend data."""

from typing import Literal

from pydantic import BaseModel


class DistrictSelection(BaseModel):
    """Popup data shown when a district is clicked on the map."""

    district_id: str
    district_name: str
    total_passengers: int
    peak_hour: int


class DashboardSummary(BaseModel):
    total_passengers: int
    daily_average: int
    peak_hour_traffic: float
    weekday_weekend_ratio: float
    top_district: str


class TopDistrict(BaseModel):
    district_name: str
    total_traffic: int
    rank: int
    traffic_density: float
    station_count: int


class TopStation(BaseModel):
    station_name: str
    total_traffic: int
    daily_average: float
    district: str


class HeatmapOverview(BaseModel):
    top_districts: list[TopDistrict]
    top_stations: list[TopStation]


class StationDrtRanking(BaseModel):
    """Per-station DRT score split into weighted components."""

    station_id: str
    station_name: str
    district: str
    drt_score: float
    demand_score: float
    accessibility_score: float
    efficiency_score: float
    recommendation: str


class AnomalyPattern(BaseModel):
    pattern_id: int
    station_name: str
    district: str
    anomaly_score: float
    pattern_description: str
    detected_at: str
    severity: Literal["high", "medium", "low"]
