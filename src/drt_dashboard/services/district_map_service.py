"""District map service — overlay loading and district click handling."""

from pathlib import Path

from loguru import logger

from drt_dashboard.lib.analytics import AnalyticsClient
from drt_dashboard.lib.boundary_loader import (
    DEFAULT_TARGET_REGION,
    ExtractionResult,
    extract_district_boundaries,
    load_boundaries,
    verify_sha512,
)
from drt_dashboard.lib.districts import resolve_district_id
from drt_dashboard.schemas.dashboard import DistrictSelection


def load_district_overlay(
    file_path: Path,
    target_region: str = DEFAULT_TARGET_REGION,
    *,
    strict: bool = False,
    dissolve: bool = False,
    verify_checksum: bool = False,
) -> ExtractionResult:
    """Load a dong boundary dataset and extract the district overlay.

    Args:
        file_path: Boundary dataset (.geojson, .json or .shp).
        target_region: Region name whose districts are kept.
        strict: Fail on unsupported geometry instead of skipping it.
        dissolve: Union each district's polygons into an outer boundary.
        verify_checksum: Check the file against its ``.sha512.txt`` companion first.

    Returns:
        ExtractionResult for the target region.

    Raises:
        ValueError: If the file cannot be loaded, fails checksum
            verification, or (in strict mode) has unsupported geometry.
    """
    if verify_checksum:
        verify_sha512(file_path)

    raw_features = load_boundaries(file_path)
    result = extract_district_boundaries(raw_features, target_region, strict=strict, dissolve=dissolve)

    logger.info(f"Loaded district overlay from {file_path.name}: {len(result.features)} districts")
    if not result.features:
        logger.warning(f"No districts found for region {target_region} in {file_path.name}")

    return result


async def select_district(client: AnalyticsClient, display_name: str, month: str | None = None) -> DistrictSelection:
    """Build the popup data for a clicked district.

    Args:
        client: Analytics backend client.
        display_name: District display name from the overlay feature.
        month: Analysis month; defaults to the client's default.

    Returns:
        DistrictSelection with the district's identifier and traffic headline.

    Raises:
        AnalyticsApiError: If the traffic request fails.
    """
    district_id = resolve_district_id(display_name)
    logger.info(f"District selected: {display_name} ({district_id})")

    traffic = await client.get_traffic_patterns(district_id, month)

    return DistrictSelection(
        district_id=district_id,
        district_name=display_name,
        total_passengers=traffic.total_passengers,
        peak_hour=traffic.peak_hours.weekday_morning_peak.hour,
    )
