"""Spherical geodesy helpers.

All functions work on a sphere with the mean earth radius, which is what
web-map tooling uses for line lengths and bearings.
"""
from math import radians, sin, cos, atan2, asin, degrees, sqrt
from typing import Sequence
from airguard.domain.coordinate import Coordinate

EARTH_RADIUS_KM = 6371.0088


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Calculate great-circle distance between two points using Haversine formula."""
    lat1_rad = radians(a.lat)
    lat2_rad = radians(b.lat)
    delta_lat = radians(b.lat - a.lat)
    delta_lon = radians(b.lng - a.lng)

    h = sin(delta_lat / 2) ** 2 + cos(lat1_rad) * cos(lat2_rad) * sin(delta_lon / 2) ** 2
    c = 2 * atan2(sqrt(h), sqrt(1 - h))

    return EARTH_RADIUS_KM * c


def path_length_km(points: Sequence[Coordinate]) -> float:
    """Total length of the polyline through all points, in order."""
    total = 0.0
    for i in range(len(points) - 1):
        total += haversine_km(points[i], points[i + 1])
    return total


def bearing_deg(origin: Coordinate, target: Coordinate) -> float:
    """Initial great-circle bearing from origin to target.

    Returns:
        Bearing in degrees, -180..180, 0 = North
    """
    lat1_rad = radians(origin.lat)
    lat2_rad = radians(target.lat)
    dlon_rad = radians(target.lng - origin.lng)

    y = sin(dlon_rad) * cos(lat2_rad)
    x = cos(lat1_rad) * sin(lat2_rad) - sin(lat1_rad) * cos(lat2_rad) * cos(dlon_rad)
    return degrees(atan2(y, x))


def destination(origin: Coordinate, distance_km: float, bearing: float) -> Coordinate:
    """Point reached by travelling distance_km from origin on the given bearing."""
    lat1 = radians(origin.lat)
    lon1 = radians(origin.lng)
    brg = radians(bearing)
    delta = distance_km / EARTH_RADIUS_KM

    lat2 = asin(sin(lat1) * cos(delta) + cos(lat1) * sin(delta) * cos(brg))
    lon2 = lon1 + atan2(sin(brg) * sin(delta) * cos(lat1), cos(delta) - sin(lat1) * sin(lat2))

    lng = (degrees(lon2) + 540) % 360 - 180
    return Coordinate(lat=degrees(lat2), lng=lng)


def along(points: Sequence[Coordinate], distance_km: float) -> Coordinate:
    """Point at distance_km along the polyline, clamped to its ends."""
    if not points:
        raise ValueError("Cannot walk along an empty path")
    if distance_km <= 0:
        return points[0]

    travelled = 0.0
    for i in range(len(points) - 1):
        start, end = points[i], points[i + 1]
        segment = haversine_km(start, end)
        if segment > 0 and travelled + segment >= distance_km:
            return destination(start, distance_km - travelled, bearing_deg(start, end))
        travelled += segment

    return points[-1]
