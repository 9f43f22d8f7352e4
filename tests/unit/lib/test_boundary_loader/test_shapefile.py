"""Unit tests for the shapefile dong boundary reader."""

from pathlib import Path
from unittest.mock import patch

import geopandas as gpd
import numpy as np
import pytest
from shapely.geometry import LineString, MultiPolygon, Polygon

from drt_dashboard.lib.boundary_loader.shapefile import MAX_SHAPEFILE_SIZE_BYTES, _serialize_value, read_shapefile
from tests.helpers import SEOUL


def _make_gdf(geometries: list, columns: dict | None = None, crs: str = "EPSG:4326") -> gpd.GeoDataFrame:
    """Helper to create a GeoDataFrame for testing."""
    data = columns or {}
    return gpd.GeoDataFrame(data, geometry=geometries, crs=crs)


def _dong_columns(n: int = 1) -> dict:
    return {"sggnm": ["종로구"] * n, "sgg": ["11110"] * n, "sidonm": [SEOUL] * n}


class TestReadShapefile:
    """Tests for read_shapefile function."""

    @patch("drt_dashboard.lib.boundary_loader.shapefile.gpd.read_file")
    def test_polygon_row(self, mock_read: object, tmp_path: Path) -> None:
        poly = Polygon([(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)])
        mock_read.return_value = _make_gdf([poly], _dong_columns())

        shp = tmp_path / "dong.shp"
        shp.write_bytes(b"fake")

        features = read_shapefile(shp)
        assert len(features) == 1
        assert features[0].district_name == "종로구"
        assert features[0].district_code == "11110"
        assert features[0].region_name == SEOUL
        assert features[0].geometry_type == "Polygon"
        assert features[0].coordinates == [[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [0.0, 0.0]]]

    @patch("drt_dashboard.lib.boundary_loader.shapefile.gpd.read_file")
    def test_multipolygon_row(self, mock_read: object, tmp_path: Path) -> None:
        multi = MultiPolygon(
            [
                Polygon([(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]),
                Polygon([(2, 0), (3, 0), (3, 1), (2, 1), (2, 0)]),
            ]
        )
        mock_read.return_value = _make_gdf([multi], _dong_columns())

        shp = tmp_path / "dong.shp"
        shp.write_bytes(b"fake")

        features = read_shapefile(shp)
        assert features[0].geometry_type == "MultiPolygon"
        assert len(features[0].coordinates) == 2

    @patch("drt_dashboard.lib.boundary_loader.shapefile.gpd.read_file")
    def test_non_polygon_geometry_passed_through(self, mock_read: object, tmp_path: Path) -> None:
        """Unsupported types are left for the extractor to report."""
        mock_read.return_value = _make_gdf([LineString([(0, 0), (1, 1)])], _dong_columns())

        shp = tmp_path / "dong.shp"
        shp.write_bytes(b"fake")

        features = read_shapefile(shp)
        assert features[0].geometry_type == "LineString"

    @patch("drt_dashboard.lib.boundary_loader.shapefile.gpd.read_file")
    def test_reprojects_to_wgs84(self, mock_read: object, tmp_path: Path) -> None:
        poly = Polygon([(200000, 550000), (201000, 550000), (201000, 551000), (200000, 551000), (200000, 550000)])
        mock_read.return_value = _make_gdf([poly], _dong_columns(), crs="EPSG:5186")

        shp = tmp_path / "dong.shp"
        shp.write_bytes(b"fake")

        features = read_shapefile(shp)
        lon, lat = features[0].coordinates[0][0]
        assert 124 < lon < 132
        assert 33 < lat < 39

    @patch("drt_dashboard.lib.boundary_loader.shapefile.gpd.read_file")
    def test_empty_shapefile_raises(self, mock_read: object, tmp_path: Path) -> None:
        mock_read.return_value = gpd.GeoDataFrame(geometry=[], crs="EPSG:4326")

        shp = tmp_path / "dong.shp"
        shp.write_bytes(b"fake")

        with pytest.raises(ValueError, match="empty"):
            read_shapefile(shp)

    def test_oversized_file_raises(self, tmp_path: Path) -> None:
        shp = tmp_path / "huge.shp"
        shp.write_bytes(b"x")

        with (
            patch("drt_dashboard.lib.boundary_loader.shapefile.MAX_SHAPEFILE_SIZE_BYTES", 0),
            pytest.raises(ValueError, match="exceeds maximum size"),
        ):
            read_shapefile(shp)

    def test_size_limit(self) -> None:
        assert MAX_SHAPEFILE_SIZE_BYTES == 500 * 1024 * 1024


class TestSerializeValue:
    def test_nan_becomes_none(self) -> None:
        assert _serialize_value(float("nan")) is None

    def test_numpy_integer(self) -> None:
        value = _serialize_value(np.int64(11110))
        assert value == 11110
        assert isinstance(value, int)

    def test_numpy_float_inf(self) -> None:
        assert _serialize_value(np.float64("inf")) is None

    def test_ndarray(self) -> None:
        assert _serialize_value(np.array([1, 2])) == [1, 2]

    def test_string_passthrough(self) -> None:
        assert _serialize_value("종로구") == "종로구"
