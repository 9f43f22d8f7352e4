"""Pydantic v2 schemas for hourly traffic pattern responses."""

from pydantic import BaseModel


class TrafficPattern(BaseModel):
    """Average boardings and alightings for one hour of the day."""

    hour: int
    avg_ride_passengers: float
    avg_alight_passengers: float
    avg_total_passengers: float


class PeakHour(BaseModel):
    hour: int
    avg_total_passengers: float


class PeakHours(BaseModel):
    weekday_morning_peak: PeakHour
    weekday_evening_peak: PeakHour
    weekend_peak: PeakHour


class HourlyTrafficResponse(BaseModel):
    """Response of ``/api/v1/traffic/hourly``."""

    analysis_month: str
    region_type: str
    region_name: str
    district_name: str | None = None
    weekday_patterns: list[TrafficPattern]
    weekend_patterns: list[TrafficPattern]
    peak_hours: PeakHours
    total_weekday_passengers: int
    total_weekend_passengers: int
    weekday_weekend_ratio: float

    @property
    def total_passengers(self) -> int:
        return self.total_weekday_passengers + self.total_weekend_passengers
