"""District boundary extraction.

Regroups administrative-dong polygons under their parent district (gu) code
for a single top-level region. Rings are concatenated, not merged: internal
dong boundaries stay in the coordinate data unless ``dissolve`` is requested.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from drt_dashboard.lib.boundary_loader.dissolve import dissolve_district
from drt_dashboard.lib.boundary_loader.district import DistrictFeature, ExtractionResult, SkippedGeometry
from drt_dashboard.lib.boundary_loader.geojson import RawFeature, parse_feature_collection

DEFAULT_TARGET_REGION = "서울특별시"


class UnsupportedGeometryError(ValueError):
    """Raised in strict mode when a feature's geometry is neither Polygon nor MultiPolygon.

    Args:
        index: Position of the feature in the input sequence.
        district_code: District code of the offending feature.
        geometry_type: The unsupported geometry type (None when missing).
    """

    def __init__(self, index: int, district_code: str, geometry_type: str | None) -> None:
        self.index = index
        self.district_code = district_code
        self.geometry_type = geometry_type
        super().__init__(f"Feature {index} (district {district_code}) has unsupported geometry type: {geometry_type}")


@dataclass
class DistrictAccumulator:
    """Per-district working state for a single extraction pass."""

    district_name: str
    district_code: str
    region_name: str
    polygons: list = field(default_factory=list)

    def to_feature(self) -> DistrictFeature:
        return DistrictFeature(
            district_name=self.district_name,
            district_code=self.district_code,
            region_name=self.region_name,
            polygons=list(self.polygons),
        )


def normalize_ring_groups(geometry_type: str | None, coordinates: list) -> list | None:
    """Return a geometry's coordinates as a list of ring-groups.

    A Polygon becomes a one-element list; a MultiPolygon is returned as-is.
    Returns None for any other geometry type.
    """
    if geometry_type == "Polygon":
        return [coordinates]
    if geometry_type == "MultiPolygon":
        return coordinates
    return None


def extract_district_boundaries(
    features: Iterable[RawFeature],
    target_region: str = DEFAULT_TARGET_REGION,
    *,
    strict: bool = False,
    dissolve: bool = False,
) -> ExtractionResult:
    """Group sub-region features into one MultiPolygon feature per district.

    Features whose region name differs from ``target_region`` are excluded.
    Districts are emitted in the order their code was first seen, and each
    district's ring-groups keep input order.

    Args:
        features: Sub-region features in source order.
        target_region: Region name (``sidonm``) to keep.
        strict: Raise on unsupported geometry instead of recording a skip.
        dissolve: Union each district's polygons to remove internal edges.

    Returns:
        ExtractionResult with the district features and skip diagnostics.

    Raises:
        UnsupportedGeometryError: In strict mode, on the first feature with
            a geometry other than Polygon or MultiPolygon.
    """
    accumulators: dict[str, DistrictAccumulator] = {}
    skipped: list[SkippedGeometry] = []
    excluded = 0

    for index, feature in enumerate(features):
        if feature.region_name != target_region:
            excluded += 1
            continue

        accumulator = accumulators.get(feature.district_code)
        if accumulator is None:
            accumulator = DistrictAccumulator(
                district_name=feature.district_name,
                district_code=feature.district_code,
                region_name=feature.region_name,
            )
            accumulators[feature.district_code] = accumulator

        ring_groups = normalize_ring_groups(feature.geometry_type, feature.coordinates)
        if ring_groups is None:
            if strict:
                raise UnsupportedGeometryError(index, feature.district_code, feature.geometry_type)
            logger.warning(
                f"Feature {index} (district {feature.district_code}) has unsupported geometry "
                f"type {feature.geometry_type!r}, contributing no polygons"
            )
            skipped.append(
                SkippedGeometry(
                    index=index,
                    district_code=feature.district_code,
                    geometry_type=feature.geometry_type,
                    reason="unsupported geometry type",
                )
            )
            continue

        accumulator.polygons.extend(ring_groups)

    districts = [acc.to_feature() for acc in accumulators.values()]
    if dissolve:
        districts = [dissolve_district(d) for d in districts]

    logger.info(
        f"Extracted {len(districts)} districts for {target_region} "
        f"({excluded} features outside region, {len(skipped)} skipped geometries)"
    )
    return ExtractionResult(features=districts, skipped=skipped, excluded_count=excluded)


def extract_from_geojson(
    data: dict[str, Any],
    target_region: str = DEFAULT_TARGET_REGION,
    *,
    strict: bool = False,
    dissolve: bool = False,
) -> ExtractionResult:
    """Extract districts from a decoded GeoJSON FeatureCollection."""
    return extract_district_boundaries(
        parse_feature_collection(data),
        target_region,
        strict=strict,
        dissolve=dissolve,
    )
