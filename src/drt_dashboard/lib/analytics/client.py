"""Async HTTP client for the DRT analytics backend.

Wraps the backend's traffic, heatmap, anomaly-pattern and DRT-score REST
endpoints and validates every response into a Pydantic schema.
"""

from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from drt_dashboard.lib.analytics.base import DEFAULT_ANALYSIS_MONTH, AnalyticsApiError, normalize_analysis_month
from drt_dashboard.lib.districts import resolve_district_name
from drt_dashboard.schemas.anomaly import (
    AreaTypeAnalysis,
    IntegratedAnomalyPatterns,
    LunchTimeStation,
    NightDemandStation,
    RushHourStations,
    UnderutilizedStation,
    WeekendDominantStation,
)
from drt_dashboard.schemas.common import ApiResponse, HealthStatus
from drt_dashboard.schemas.drt_score import (
    DRT_MODEL_TYPES,
    DistrictDrtScoreResponse,
    DrtModelsResponse,
    StationDrtDetailResponse,
)
from drt_dashboard.schemas.heatmap import DistrictTraffic, HeatmapStatisticsPayload, SeoulHeatmapResponse
from drt_dashboard.schemas.traffic import HourlyTrafficResponse

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 10.0

# Pseudo-district the dashboard uses for city-wide views
CITY_WIDE = "seoul"

HEALTH_ENDPOINTS: dict[str, str] = {
    "traffic": "/api/v1/traffic/hourly/health",
    "heatmap": "/api/v1/heatmap/health",
    "anomaly-pattern": "/api/v1/anomaly-pattern/health",
    "drt-score": "/api/v1/drt-score/health",
}

ModelT = TypeVar("ModelT", bound=BaseModel)


def _segment(value: str) -> str:
    """URL-encode a single path segment."""
    return quote(value, safe="")


class AnalyticsClient:
    """Client for the analytics backend REST API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        default_analysis_month: str = DEFAULT_ANALYSIS_MONTH,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._default_month = normalize_analysis_month(default_analysis_month)
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Any) -> "AnalyticsClient":
        """Build a client from application Settings."""
        return cls(
            base_url=settings.analytics_api_url,
            timeout=settings.analytics_api_timeout,
            default_analysis_month=settings.default_analysis_month,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def _month(self, month: str | None) -> str:
        return normalize_analysis_month(month, self._default_month)

    async def _get(self, endpoint: str, params: dict[str, str] | None = None) -> Any:
        """Issue a GET request and return the decoded JSON body.

        Raises:
            AnalyticsApiError: On timeout, HTTP error status, connection
                failure or a body that is not JSON.
        """
        url = f"{self._base_url}{endpoint}"
        logger.debug(f"GET {endpoint} params={params}")

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()

            return response.json()

        except httpx.TimeoutException as e:
            logger.warning(f"Analytics API timeout for {endpoint}")
            raise AnalyticsApiError(endpoint, "Request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning(f"Analytics API HTTP error {e.response.status_code} for {endpoint}")
            raise AnalyticsApiError(
                endpoint, f"Backend returned HTTP {e.response.status_code}", status_code=e.response.status_code
            ) from e
        except httpx.ConnectError as e:
            logger.warning(f"Analytics API connection error for {endpoint}")
            raise AnalyticsApiError(endpoint, "Connection to analytics backend failed") from e
        except ValueError as e:
            logger.warning(f"Analytics API returned non-JSON body for {endpoint}")
            raise AnalyticsApiError(endpoint, "Response is not valid JSON") from e
        except Exception as e:
            logger.exception(f"Analytics API unexpected error for {endpoint}")
            raise AnalyticsApiError(endpoint, f"Unexpected error: {e}") from e

    async def _get_model(self, model: type[ModelT], endpoint: str, params: dict[str, str] | None = None) -> ModelT:
        data = await self._get(endpoint, params)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Analytics API response for {endpoint} failed validation: {e.error_count()} errors")
            raise AnalyticsApiError(endpoint, f"Failed to parse response: {e}") from e

    # ------------------------------------------------------------------
    # Traffic
    # ------------------------------------------------------------------

    async def get_traffic_patterns(self, district: str | None = None, month: str | None = None) -> HourlyTrafficResponse:
        """Fetch hourly boarding patterns for a district or the whole city.

        Args:
            district: District identifier (e.g. ``gangnam``) or display name;
                None or ``seoul`` requests the city-wide pattern.
            month: Analysis month; defaults to the client's default month.
        """
        params = {"analysis_month": self._month(month)}
        if district and district != CITY_WIDE:
            params["region_type"] = "district"
            params["district_name"] = resolve_district_name(district)
        else:
            params["region_type"] = CITY_WIDE
        return await self._get_model(HourlyTrafficResponse, "/api/v1/traffic/hourly", params)

    # ------------------------------------------------------------------
    # Heatmap
    # ------------------------------------------------------------------

    async def get_seoul_heatmap(
        self,
        month: str | None = None,
        include_station_details: bool = True,
        min_traffic_threshold: int | None = None,
    ) -> SeoulHeatmapResponse:
        params = {
            "analysis_month": self._month(month),
            "include_station_details": str(include_station_details).lower(),
        }
        if min_traffic_threshold:
            params["min_traffic_threshold"] = str(min_traffic_threshold)
        return await self._get_model(SeoulHeatmapResponse, "/api/v1/heatmap/seoul", params)

    async def get_district_heatmap(
        self,
        district_name: str,
        month: str | None = None,
        min_traffic_threshold: int | None = None,
    ) -> DistrictTraffic:
        params = {"analysis_month": self._month(month)}
        if min_traffic_threshold:
            params["min_traffic_threshold"] = str(min_traffic_threshold)
        endpoint = f"/api/v1/heatmap/districts/{_segment(district_name)}"
        return await self._get_model(DistrictTraffic, endpoint, params)

    async def get_heatmap_statistics(self, month: str | None = None) -> ApiResponse[HeatmapStatisticsPayload]:
        params = {"analysis_month": self._month(month)}
        return await self._get_model(ApiResponse[HeatmapStatisticsPayload], "/api/v1/heatmap/statistics", params)

    # ------------------------------------------------------------------
    # Anomaly patterns
    # ------------------------------------------------------------------

    def _anomaly_params(self, district_name: str, month: str | None, top_n: int) -> dict[str, str]:
        return {
            "district_name": district_name,
            "analysis_month": self._month(month),
            "top_n": str(top_n),
        }

    async def get_integrated_anomaly_patterns(
        self, district_name: str, month: str | None = None, top_n: int = 5
    ) -> ApiResponse[IntegratedAnomalyPatterns]:
        return await self._get_model(
            ApiResponse[IntegratedAnomalyPatterns],
            "/api/v1/anomaly-pattern/integration",
            self._anomaly_params(district_name, month, top_n),
        )

    async def get_weekend_dominant_stations(
        self, district_name: str, month: str | None = None, top_n: int = 5
    ) -> ApiResponse[list[WeekendDominantStation]]:
        return await self._get_model(
            ApiResponse[list[WeekendDominantStation]],
            "/api/v1/anomaly-pattern/weekend-dominant",
            self._anomaly_params(district_name, month, top_n),
        )

    async def get_night_demand_stations(
        self, district_name: str, month: str | None = None, top_n: int = 5
    ) -> ApiResponse[list[NightDemandStation]]:
        return await self._get_model(
            ApiResponse[list[NightDemandStation]],
            "/api/v1/anomaly-pattern/night-demand",
            self._anomaly_params(district_name, month, top_n),
        )

    async def get_rush_hour_stations(
        self, district_name: str, month: str | None = None, top_n: int = 5
    ) -> ApiResponse[RushHourStations]:
        return await self._get_model(
            ApiResponse[RushHourStations],
            "/api/v1/anomaly-pattern/rush-hour",
            self._anomaly_params(district_name, month, top_n),
        )

    async def get_lunch_time_stations(
        self, district_name: str, month: str | None = None, top_n: int = 5
    ) -> ApiResponse[list[LunchTimeStation]]:
        return await self._get_model(
            ApiResponse[list[LunchTimeStation]],
            "/api/v1/anomaly-pattern/lunch-time",
            self._anomaly_params(district_name, month, top_n),
        )

    async def get_area_type_analysis(
        self, district_name: str, month: str | None = None, top_n: int = 5
    ) -> ApiResponse[AreaTypeAnalysis]:
        return await self._get_model(
            ApiResponse[AreaTypeAnalysis],
            "/api/v1/anomaly-pattern/area-type",
            self._anomaly_params(district_name, month, top_n),
        )

    async def get_underutilized_stations(
        self, district_name: str, month: str | None = None, top_n: int = 10
    ) -> ApiResponse[list[UnderutilizedStation]]:
        return await self._get_model(
            ApiResponse[list[UnderutilizedStation]],
            "/api/v1/anomaly-pattern/underutilized",
            self._anomaly_params(district_name, month, top_n),
        )

    # ------------------------------------------------------------------
    # DRT scores
    # ------------------------------------------------------------------

    @staticmethod
    def _check_model_type(model_type: str) -> None:
        if model_type not in DRT_MODEL_TYPES:
            msg = f"Invalid DRT model type {model_type!r}. Supported: {', '.join(DRT_MODEL_TYPES)}"
            raise ValueError(msg)

    async def get_district_drt_scores(
        self, district_name: str, model_type: str = "commuter", month: str | None = None
    ) -> DistrictDrtScoreResponse:
        self._check_model_type(model_type)
        params = {"model_type": model_type, "analysis_month": self._month(month)}
        endpoint = f"/api/v1/drt-score/districts/{_segment(district_name)}"
        return await self._get_model(DistrictDrtScoreResponse, endpoint, params)

    async def get_station_drt_detail(
        self,
        station_id: str,
        model_type: str = "commuter",
        month: str | None = None,
        hour: int | None = None,
    ) -> StationDrtDetailResponse:
        self._check_model_type(model_type)
        params = {"model_type": model_type, "analysis_month": self._month(month)}
        if hour is not None:
            params["hour"] = str(hour)
        endpoint = f"/api/v1/drt-score/stations/{_segment(station_id)}"
        return await self._get_model(StationDrtDetailResponse, endpoint, params)

    async def get_drt_models(self) -> DrtModelsResponse:
        return await self._get_model(DrtModelsResponse, "/api/v1/drt-score/models")

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    async def health_check(self, service: str) -> HealthStatus:
        """Query one backend service's health endpoint.

        Raises:
            ValueError: If ``service`` is not a known backend service.
        """
        endpoint = HEALTH_ENDPOINTS.get(service)
        if endpoint is None:
            msg = f"Unknown analytics service {service!r}. Supported: {', '.join(HEALTH_ENDPOINTS)}"
            raise ValueError(msg)
        return await self._get_model(HealthStatus, endpoint)
