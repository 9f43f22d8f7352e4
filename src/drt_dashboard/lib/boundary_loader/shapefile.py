"""Shapefile reader using GeoPandas with pyogrio engine.

Reads .shp files, transforms CRS to EPSG:4326 (Korean boundary datasets are
commonly published in EPSG:5186/5179), and emits the same RawFeature records
as the GeoJSON reader.
"""

import math
from pathlib import Path

import geopandas as gpd
import numpy as np
from loguru import logger
from shapely.geometry import mapping

from drt_dashboard.lib.boundary_loader.geojson import RawFeature, as_coordinate_lists

# Maximum file size for shapefile input (500 MB uncompressed)
MAX_SHAPEFILE_SIZE_BYTES = 500 * 1024 * 1024


def read_shapefile(file_path: Path) -> list[RawFeature]:
    """Read a shapefile and return its sub-region features.

    Args:
        file_path: Path to .shp file or directory containing .shp file.

    Returns:
        List of RawFeature objects.

    Raises:
        ValueError: If the file is too large or has no rows.
    """
    logger.info(f"Reading shapefile: {file_path}")

    if file_path.is_file() and file_path.stat().st_size > MAX_SHAPEFILE_SIZE_BYTES:
        msg = f"Shapefile exceeds maximum size of {MAX_SHAPEFILE_SIZE_BYTES // (1024 * 1024)} MB: {file_path}"
        raise ValueError(msg)

    gdf = gpd.read_file(file_path, engine="pyogrio")

    if gdf.empty:
        msg = f"Shapefile is empty: {file_path}"
        raise ValueError(msg)

    if gdf.crs and gdf.crs.to_epsg() != 4326:
        logger.debug(f"Transforming CRS from {gdf.crs} to EPSG:4326")
        gdf = gdf.to_crs(epsg=4326)

    raw_features: list[RawFeature] = []

    for _, row in gdf.iterrows():
        props = {col: _serialize_value(row[col]) for col in gdf.columns if col != "geometry" and row[col] is not None}

        geom = row.geometry
        if geom is None or geom.is_empty:
            geometry_type, coordinates = None, []
        else:
            geo = mapping(geom)
            geometry_type = geo["type"]
            coordinates = as_coordinate_lists(geo.get("coordinates", []))

        raw_features.append(
            RawFeature.from_geojson(
                {
                    "properties": props,
                    "geometry": {"type": geometry_type, "coordinates": coordinates},
                }
            )
        )

    logger.info(f"Parsed {len(raw_features)} sub-region features from shapefile")
    return raw_features


def _serialize_value(val: object) -> object:
    """Serialize a GeoDataFrame value to JSON-safe type.

    Returns None for NaN/Inf values since they are not valid JSON.
    """
    if isinstance(val, float) and (math.isnan(val) or math.isinf(val)):
        return None
    if isinstance(val, (np.integer,)):
        return int(val)
    if isinstance(val, (np.floating,)):
        v = float(val)
        return None if math.isnan(v) or math.isinf(v) else v
    if isinstance(val, np.ndarray):
        return val.tolist()
    return val
