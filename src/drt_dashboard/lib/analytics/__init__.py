"""Analytics backend library — typed async access to the DRT analytics REST API.

Public API:
    - AnalyticsClient: Async client for traffic, heatmap, anomaly and DRT endpoints
    - AnalyticsApiError: Transport, HTTP or response-shape failure
    - normalize_analysis_month: Coerce YYYY-MM / YYYY-MM-01 to the backend form
    - DEFAULT_ANALYSIS_MONTH: Month used when none is selected
    - HEALTH_ENDPOINTS: Per-service health check paths
"""

from drt_dashboard.lib.analytics.base import DEFAULT_ANALYSIS_MONTH, AnalyticsApiError, normalize_analysis_month
from drt_dashboard.lib.analytics.client import CITY_WIDE, HEALTH_ENDPOINTS, AnalyticsClient

__all__ = [
    "CITY_WIDE",
    "DEFAULT_ANALYSIS_MONTH",
    "HEALTH_ENDPOINTS",
    "AnalyticsApiError",
    "AnalyticsClient",
    "normalize_analysis_month",
]
