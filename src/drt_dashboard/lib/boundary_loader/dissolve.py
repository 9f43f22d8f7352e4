"""Optional boundary dissolve: union a district's sub-region polygons."""

from loguru import logger
from shapely.geometry import MultiPolygon, Polygon, mapping, shape
from shapely.ops import unary_union

from drt_dashboard.lib.boundary_loader.district import DistrictFeature
from drt_dashboard.lib.boundary_loader.geojson import as_coordinate_lists


def dissolve_district(district: DistrictFeature) -> DistrictFeature:
    """Return a copy of ``district`` whose polygons are unioned into an outer boundary.

    Shared edges between adjacent sub-regions disappear. Invalid polygons are
    repaired with ``buffer(0)`` before the union.
    """
    if not district.polygons:
        return district

    parts: list[Polygon] = []
    for i, ring_group in enumerate(district.polygons):
        polygon = shape({"type": "Polygon", "coordinates": ring_group})
        if not polygon.is_valid:
            logger.warning(f"District {district.district_code} polygon {i} is invalid, attempting repair")
            polygon = polygon.buffer(0)
        parts.append(polygon)

    merged = unary_union(parts)
    if isinstance(merged, Polygon):
        merged = MultiPolygon([merged])
    elif not isinstance(merged, MultiPolygon):
        merged = MultiPolygon([g for g in getattr(merged, "geoms", []) if isinstance(g, Polygon)])

    polygons = as_coordinate_lists(mapping(merged)["coordinates"]) if not merged.is_empty else []
    logger.debug(
        f"Dissolved district {district.district_code}: {district.polygon_count} -> {len(polygons)} polygons"
    )
    return DistrictFeature(
        district_name=district.district_name,
        district_code=district.district_code,
        region_name=district.region_name,
        polygons=polygons,
    )
