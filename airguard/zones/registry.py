"""Static airspace zone registry."""
import json
from typing import List, Sequence, Tuple
from shapely.geometry import shape
from shapely.validation import make_valid
from airguard.domain.coordinate import Coordinate
from airguard.domain.zone import Zone, ZoneSeverity
from airguard.risk.geometry import path_intersects_zone


def create_box(center_lat: float, center_lng: float, size_deg: float) -> Tuple[Coordinate, ...]:
    """Rough square ring (NW, NE, SE, SW) around a center point."""
    half = size_deg / 2
    return (
        Coordinate(center_lat + half, center_lng - half),
        Coordinate(center_lat + half, center_lng + half),
        Coordinate(center_lat - half, center_lng + half),
        Coordinate(center_lat - half, center_lng - half),
    )


DEFAULT_ZONES: Tuple[Zone, ...] = (
    Zone(
        id="z1",
        name="Kempegowda Int. Airport (KIA)",
        severity=ZoneSeverity.CRITICAL,
        boundary=create_box(13.1986, 77.7066, 0.05),
    ),
    Zone(
        id="z2",
        name="Yelahanka Air Force Station",
        severity=ZoneSeverity.RESTRICTED,
        boundary=create_box(13.1350, 77.6100, 0.04),
    ),
    Zone(
        id="z3",
        name="Bangalore City Control Zone",
        severity=ZoneSeverity.CONTROLLED,
        boundary=create_box(12.9716, 77.5946, 0.08),
    ),
)


def intersecting_zones(path: Sequence[Coordinate], zones: Sequence[Zone]) -> List[Zone]:
    """Zones crossed by the path, in registry order."""
    return [zone for zone in zones if path_intersects_zone(path, zone)]


def load_zones_from_geojson(file_path: str) -> List[Zone]:
    """Load zones from a GeoJSON file.

    Polygon features become zones; the exterior ring of each polygon is the
    boundary. Properties `id`, `name` and `severity` (default CRITICAL) are
    read when present. MultiPolygons yield one zone per part.

    Args:
        file_path: Path to GeoJSON file

    Returns:
        List of Zone objects in file order
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        geojson_data = json.load(f)

    if geojson_data.get("type") == "FeatureCollection":
        features = geojson_data.get("features", [])
    elif geojson_data.get("type") == "Feature":
        features = [geojson_data]
    elif geojson_data.get("type") in ["Polygon", "MultiPolygon"]:
        features = [{"geometry": geojson_data, "properties": {}}]
    else:
        raise ValueError(f"Unsupported GeoJSON type: {geojson_data.get('type')}")

    zones = []
    for idx, feature in enumerate(features):
        geometry_data = feature.get("geometry")
        if not geometry_data:
            continue

        properties = feature.get("properties") or {}
        try:
            geometry = shape(geometry_data)
        except Exception as e:
            raise ValueError(f"Feature {idx + 1}: Invalid geometry: {e}") from e
        if not geometry.is_valid:
            geometry = make_valid(geometry)

        if geometry.geom_type == "Polygon":
            parts = [geometry]
        elif geometry.geom_type == "MultiPolygon":
            parts = list(geometry.geoms)
        else:
            continue

        zone_id = str(properties.get("id") or f"zone_{idx + 1}")
        name = properties.get("name") or f"Zone_{idx + 1}"
        severity = properties.get("severity", ZoneSeverity.CRITICAL.value)

        for part_idx, polygon in enumerate(parts):
            ring = list(polygon.exterior.coords)[:-1]
            zones.append(Zone(
                id=zone_id if len(parts) == 1 else f"{zone_id}_{part_idx + 1}",
                name=name,
                severity=severity,
                boundary=tuple(Coordinate(lat=y, lng=x) for x, y, *_ in ring),
            ))

    return zones
