"""Builders for boundary features and backend payloads shared by the test suite."""

SEOUL = "서울특별시"

SQUARE = [[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [0.0, 0.0]]]


def make_feature(
    code: str,
    name: str,
    region: str = SEOUL,
    geometry_type: str | None = "Polygon",
    coordinates: list | None = None,
) -> dict:
    """Build one administrative-dong GeoJSON feature."""
    geometry = None
    if geometry_type is not None:
        geometry = {"type": geometry_type, "coordinates": coordinates if coordinates is not None else SQUARE}
    return {
        "type": "Feature",
        "properties": {"sggnm": name, "sgg": code, "sidonm": region, "adm_nm": f"{region} {name} 동"},
        "geometry": geometry,
    }


def square_at(x: float, y: float = 0.0, size: float = 1.0) -> list:
    """Polygon coordinates (one outer ring) for an axis-aligned square."""
    return [[[x, y], [x + size, y], [x + size, y + size], [x, y + size], [x, y]]]


def station_info(station_id: str, name: str, district: str = "강남구") -> dict:
    return {
        "station_id": station_id,
        "station_name": name,
        "latitude": 37.4979,
        "longitude": 127.0276,
        "district_name": district,
        "administrative_dong": "역삼1동",
    }
