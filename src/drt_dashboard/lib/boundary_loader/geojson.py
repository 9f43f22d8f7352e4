"""GeoJSON reader for administrative-subdivision (dong) boundary datasets."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

# Property keys used by the administrative-dong dataset
DISTRICT_NAME_KEY = "sggnm"
DISTRICT_CODE_KEY = "sgg"
REGION_NAME_KEY = "sidonm"


@dataclass(frozen=True)
class RawFeature:
    """One sub-region polygon record as read from the source dataset.

    ``coordinates`` is kept exactly as the source encodes it: a list of rings
    for ``Polygon`` and a list of ring-groups for ``MultiPolygon``.
    """

    district_name: str
    district_code: str
    region_name: str
    geometry_type: str | None
    coordinates: list = field(default_factory=list)
    properties: dict = field(default_factory=dict)

    @classmethod
    def from_geojson(cls, feature: dict[str, Any]) -> "RawFeature":
        """Build a RawFeature from a decoded GeoJSON Feature object."""
        props = feature.get("properties") or {}
        geometry = feature.get("geometry") or {}
        return cls(
            district_name=_property_str(props, DISTRICT_NAME_KEY),
            district_code=_property_str(props, DISTRICT_CODE_KEY),
            region_name=_property_str(props, REGION_NAME_KEY),
            geometry_type=geometry.get("type"),
            coordinates=geometry.get("coordinates") or [],
            properties=props,
        )


def _property_str(props: dict[str, Any], key: str) -> str:
    """Return a property as a string; missing and null values become ``""``."""
    value = props.get(key)
    return "" if value is None else str(value)


def parse_feature_collection(data: Any, source: str = "<memory>") -> list[RawFeature]:
    """Convert a decoded FeatureCollection into RawFeature records.

    Args:
        data: Decoded GeoJSON object.
        source: Label used in error messages.

    Returns:
        List of RawFeature objects in input order.

    Raises:
        ValueError: If ``data`` is not a FeatureCollection or has no features.
    """
    if not isinstance(data, dict):
        msg = f"Expected FeatureCollection, got JSON {type(data).__name__}: {source}"
        raise ValueError(msg)

    if data.get("type") != "FeatureCollection":
        msg = f"Expected FeatureCollection, got {data.get('type')}"
        raise ValueError(msg)

    features = data.get("features", [])
    if not features:
        msg = f"GeoJSON has no features: {source}"
        raise ValueError(msg)

    if not isinstance(features, list):
        msg = f"GeoJSON features must be a list: {source}"
        raise ValueError(msg)

    for i, feature in enumerate(features):
        if not isinstance(feature, dict):
            msg = f"Feature {i} is not a GeoJSON object: {source}"
            raise ValueError(msg)

    return [RawFeature.from_geojson(feature) for feature in features]


def read_geojson(file_path: Path) -> list[RawFeature]:
    """Read a GeoJSON file and return its sub-region features.

    Args:
        file_path: Path to .geojson or .json file.

    Returns:
        List of RawFeature objects.

    Raises:
        ValueError: If the file is not a non-empty FeatureCollection.
    """
    logger.info(f"Reading GeoJSON: {file_path}")

    with file_path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    raw_features = parse_feature_collection(data, source=str(file_path))

    logger.info(f"Parsed {len(raw_features)} sub-region features from GeoJSON")
    return raw_features


def as_coordinate_lists(coords: Any) -> Any:
    """Recursively convert shapely-style coordinate tuples to JSON-style lists."""
    if isinstance(coords, (list, tuple)):
        if coords and isinstance(coords[0], (int, float)):
            return list(coords)
        return [as_coordinate_lists(c) for c in coords]
    return coords
