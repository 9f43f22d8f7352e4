"""Boundary loader library — reads dong boundary datasets and extracts districts.

Public API:
    - load_boundaries: Auto-detect format and parse a boundary file
    - RawFeature: One sub-region record from the source dataset
    - read_geojson / read_shapefile: Direct format readers
    - parse_feature_collection: Decoded GeoJSON to RawFeature list
    - extract_district_boundaries: Group sub-regions under district codes
    - extract_from_geojson: Same, starting from a decoded FeatureCollection
    - DistrictFeature / ExtractionResult / SkippedGeometry: Extraction output
    - UnsupportedGeometryError: Strict-mode extraction failure
    - dissolve_district: Union a district's polygons into an outer boundary
    - verify_sha512: SHA512 checksum verification
"""

from pathlib import Path

from drt_dashboard.lib.boundary_loader.checksum import compute_sha512, verify_sha512
from drt_dashboard.lib.boundary_loader.dissolve import dissolve_district
from drt_dashboard.lib.boundary_loader.district import DistrictFeature, ExtractionResult, SkippedGeometry
from drt_dashboard.lib.boundary_loader.extractor import (
    DEFAULT_TARGET_REGION,
    UnsupportedGeometryError,
    extract_district_boundaries,
    extract_from_geojson,
    normalize_ring_groups,
)
from drt_dashboard.lib.boundary_loader.geojson import RawFeature, parse_feature_collection, read_geojson
from drt_dashboard.lib.boundary_loader.shapefile import read_shapefile


def load_boundaries(file_path: Path) -> list[RawFeature]:
    """Load sub-region features from a file with automatic format detection.

    Supports .shp (shapefile), .geojson, and .json (GeoJSON) formats.

    Args:
        file_path: Path to the boundary file.

    Returns:
        List of RawFeature objects.

    Raises:
        ValueError: If the file format is not supported.
    """
    suffix = file_path.suffix.lower()

    if suffix == ".shp":
        return read_shapefile(file_path)
    if suffix in (".geojson", ".json"):
        return read_geojson(file_path)

    msg = f"Unsupported boundary file format: {suffix}. Supported: .shp, .geojson, .json"
    raise ValueError(msg)


__all__ = [
    "DEFAULT_TARGET_REGION",
    "DistrictFeature",
    "ExtractionResult",
    "RawFeature",
    "SkippedGeometry",
    "UnsupportedGeometryError",
    "compute_sha512",
    "dissolve_district",
    "extract_district_boundaries",
    "extract_from_geojson",
    "load_boundaries",
    "normalize_ring_groups",
    "parse_feature_collection",
    "read_geojson",
    "read_shapefile",
    "verify_sha512",
]
