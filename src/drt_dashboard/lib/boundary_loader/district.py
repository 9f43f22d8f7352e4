"""District-level boundary records produced by the extractor."""

from dataclasses import dataclass, field
from typing import Any

from shapely.geometry import MultiPolygon, shape

from drt_dashboard.lib.boundary_loader.geojson import DISTRICT_CODE_KEY, DISTRICT_NAME_KEY, REGION_NAME_KEY


@dataclass
class DistrictFeature:
    """One district (gu) with the ring-groups of all its sub-regions.

    ``polygons`` is a MultiPolygon coordinate array: each element is one
    ring-group (outer ring followed by any hole rings).
    """

    district_name: str
    district_code: str
    region_name: str
    polygons: list = field(default_factory=list)

    geometry_type = "MultiPolygon"

    @property
    def polygon_count(self) -> int:
        return len(self.polygons)

    def to_geojson(self) -> dict[str, Any]:
        """Render as a GeoJSON Feature using the source dataset's property keys."""
        return {
            "type": "Feature",
            "properties": {
                DISTRICT_NAME_KEY: self.district_name,
                DISTRICT_CODE_KEY: self.district_code,
                REGION_NAME_KEY: self.region_name,
            },
            "geometry": {
                "type": self.geometry_type,
                "coordinates": self.polygons,
            },
        }

    def to_shape(self) -> MultiPolygon:
        """Return the geometry as a shapely MultiPolygon."""
        return shape({"type": self.geometry_type, "coordinates": self.polygons})


@dataclass(frozen=True)
class SkippedGeometry:
    """A feature whose geometry contributed no ring-groups."""

    index: int
    district_code: str
    geometry_type: str | None
    reason: str


@dataclass
class ExtractionResult:
    """Outcome of one extraction pass."""

    features: list[DistrictFeature] = field(default_factory=list)
    skipped: list[SkippedGeometry] = field(default_factory=list)
    excluded_count: int = 0

    @property
    def district_codes(self) -> list[str]:
        return [f.district_code for f in self.features]

    @property
    def polygon_count(self) -> int:
        return sum(f.polygon_count for f in self.features)

    def get(self, district_code: str) -> DistrictFeature | None:
        """Return the district with the given code, if present."""
        for feature in self.features:
            if feature.district_code == district_code:
                return feature
        return None

    def to_geojson(self) -> dict[str, Any]:
        """Render the districts as a GeoJSON FeatureCollection."""
        return {
            "type": "FeatureCollection",
            "features": [f.to_geojson() for f in self.features],
        }
