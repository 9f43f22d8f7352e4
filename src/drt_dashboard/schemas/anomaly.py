"""Pydantic v2 schemas for anomaly-pattern analysis responses."""

from pydantic import BaseModel, Field

from drt_dashboard.schemas.common import StationInfo


class WeekendDominantStation(BaseModel):
    station: StationInfo
    weekend_total_traffic: int
    weekend_peak_hours: list[int]
    weekend_peak_traffic: list[int]
    rank: int
    vs_district_avg: float


class NightDemandStation(BaseModel):
    station: StationInfo
    total_night_ride: int
    night_hours_traffic: list[int]
    vs_district_avg: float


class MorningRushStation(BaseModel):
    station: StationInfo
    total_morning_rush: int
    morning_hours_traffic: list[int]
    vs_district_avg: float


class EveningRushStation(BaseModel):
    station: StationInfo
    total_evening_rush: int
    evening_hours_traffic: list[int]
    vs_district_avg: float


class RushHourStations(BaseModel):
    morning_rush: list[MorningRushStation] = Field(default_factory=list)
    evening_rush: list[EveningRushStation] = Field(default_factory=list)


class LunchTimeStation(BaseModel):
    station: StationInfo
    total_lunch_alight: int
    lunch_hours_alight: list[int]
    vs_district_avg: float


class AreaTypeStation(BaseModel):
    """Morning/evening boarding imbalance for a residential or business stop."""

    station: StationInfo
    morning_ride: int
    morning_alight: int
    evening_ride: int
    evening_alight: int
    total_traffic: int
    imbalance_ratio: float


class AreaTypeAnalysis(BaseModel):
    residential_stations: list[AreaTypeStation] = Field(default_factory=list)
    business_stations: list[AreaTypeStation] = Field(default_factory=list)


class UnderutilizedStation(BaseModel):
    station: StationInfo
    avg_daily_passengers: float
    max_daily_passengers: float
    connecting_routes: int
    utilization_rate: float
    efficiency_score: float


class IntegratedAnomalyPatterns(BaseModel):
    """``data`` member of ``/api/v1/anomaly-pattern/integration``."""

    district_name: str
    analysis_month: str
    generated_at: str
    weekend_dominant_stations: list[WeekendDominantStation] = Field(default_factory=list)
    night_demand_stations: list[NightDemandStation] = Field(default_factory=list)
    rush_hour_stations: RushHourStations = Field(default_factory=RushHourStations)
    lunch_time_stations: list[LunchTimeStation] = Field(default_factory=list)
    area_type_analysis: AreaTypeAnalysis = Field(default_factory=AreaTypeAnalysis)
    underutilized_stations: list[UnderutilizedStation] = Field(default_factory=list)
