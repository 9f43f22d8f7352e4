"""Pydantic v2 schemas for DRT suitability score responses."""

from pydantic import BaseModel, Field

from drt_dashboard.schemas.common import Coordinate, StationInfo

DRT_MODEL_TYPES: tuple[str, ...] = ("commuter", "tourism", "vulnerable")


class StationDrtScoreSummary(BaseModel):
    station_id: str
    station_name: str
    coordinate: Coordinate
    drt_score: float
    peak_hour: int


class DistrictDrtScoreResponse(BaseModel):
    """Response of ``/api/v1/drt-score/districts/{district}``."""

    district_name: str
    model_type: str
    analysis_month: str
    stations: list[StationDrtScoreSummary] = Field(default_factory=list)
    top_stations: list[StationDrtScoreSummary] = Field(default_factory=list)


class HourlyScore(BaseModel):
    hour: int
    score: float


class StationDrtDetailResponse(BaseModel):
    """Response of ``/api/v1/drt-score/stations/{station_id}``."""

    station: StationInfo
    model_type: str
    analysis_month: str
    current_hour: int
    current_score: float
    peak_score: float
    peak_hour: int
    monthly_average: float
    feature_scores: dict[str, float] = Field(default_factory=dict)
    hourly_scores: list[HourlyScore] = Field(default_factory=list)


class DrtModelInfo(BaseModel):
    type: str
    name: str
    description: str
    indicators: list[str] = Field(default_factory=list)
    peak_hours: list[int] | None = None
    weighted_hours: list[int] | None = None
    vulnerable_hours: list[int] | None = None
    feature_descriptions: dict[str, str] = Field(default_factory=dict)


class DrtModelsResponse(BaseModel):
    models: list[DrtModelInfo]
