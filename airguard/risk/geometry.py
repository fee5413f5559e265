"""Path/zone geometry tests."""
from typing import Optional, Sequence
from shapely.geometry import LineString, Point
from shapely.geometry.base import BaseGeometry
from airguard.domain.coordinate import Coordinate
from airguard.domain.zone import Zone


def path_to_line(path: Sequence[Coordinate]) -> Optional[BaseGeometry]:
    """Build a 2D geometry from the path, or None if it has fewer than 2 points.

    A path whose points all coincide collapses to a Point.
    """
    if len(path) < 2:
        return None
    coords = [p.to_lnglat() for p in path]
    if len(set(coords)) == 1:
        return Point(coords[0])
    return LineString(coords)


def path_intersects_zone(path: Sequence[Coordinate], zone: Zone) -> bool:
    """Check if the path line crosses or touches the zone polygon.

    Degenerate paths and degenerate zones never intersect.
    """
    line = path_to_line(path)
    polygon = zone.polygon
    if line is None or polygon is None:
        return False
    return polygon.intersects(line)


def point_in_zone(point: Coordinate, zone: Zone) -> bool:
    """Check if a point is inside the zone, boundary included."""
    polygon = zone.polygon
    if polygon is None:
        return False
    pt = Point(point.to_lnglat())
    return polygon.contains(pt) or polygon.touches(pt)
