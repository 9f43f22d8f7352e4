"""Common Pydantic v2 schemas shared across analytics backend responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope used by the backend's anomaly-pattern and statistics endpoints."""

    success: bool
    message: str
    data: T
    timestamp: str | None = None
    execution_time: float | None = Field(default=None, description="Server-side execution time in seconds")


class Coordinate(BaseModel):
    """A WGS84 point as the backend encodes it."""

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class Boundary(BaseModel):
    """Boundary rings as lists of points."""

    coordinates: list[list[Coordinate]] = Field(default_factory=list)


class StationInfo(BaseModel):
    """Bus stop metadata embedded in anomaly and DRT responses."""

    station_id: str
    station_name: str
    latitude: float
    longitude: float
    district_name: str
    administrative_dong: str


class HealthStatus(BaseModel):
    """Loose schema for the per-service health endpoints."""

    model_config = {"extra": "allow"}

    success: bool = True
    message: str = ""
    data: dict = Field(default_factory=dict)
