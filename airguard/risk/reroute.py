"""Auto-reroute of waypoints out of critical no-fly zones."""
from typing import List, Optional, Sequence
import logging

from airguard.config import RiskConfig, DEFAULT_RISK_CONFIG
from airguard.domain.coordinate import Coordinate
from airguard.domain.zone import Zone, ZoneSeverity
from airguard.risk.geodesy import bearing_deg, destination, haversine_km
from airguard.risk.geometry import point_in_zone

logger = logging.getLogger(__name__)


def _containing_critical_zone(point: Coordinate, zones: Sequence[Zone]) -> Optional[Zone]:
    """Critical zone containing the point whose centroid is nearest to it.

    Ties keep the earliest zone in registry order.
    """
    best_zone = None
    best_distance = float('inf')
    for zone in zones:
        if zone.severity != ZoneSeverity.CRITICAL:
            continue
        if not point_in_zone(point, zone):
            continue
        centroid = zone.centroid
        if centroid is None:
            continue
        distance = haversine_km(centroid, point)
        if distance < best_distance:
            best_distance = distance
            best_zone = zone
    return best_zone


def displace_from_zone(point: Coordinate, zone: Zone,
                       radius_km: float = DEFAULT_RISK_CONFIG.reroute_radius_km) -> Coordinate:
    """Project point radially onto a circle of radius_km around the zone centroid."""
    centroid = zone.centroid
    if centroid is None:
        return point
    # A point exactly on the centroid has no bearing; push it north
    bearing = bearing_deg(centroid, point) if centroid != point else 0.0
    return destination(centroid, radius_km, bearing)


def reroute(path: Sequence[Coordinate], zones: Sequence[Zone],
            config: RiskConfig = DEFAULT_RISK_CONFIG) -> List[Coordinate]:
    """Nudge waypoints out of critical zones.

    Single pass: the displaced point is not re-checked against other zones
    and the corrected path is not re-scored. Callers re-run the evaluator.

    Args:
        path: Ordered waypoints
        zones: Zone registry
        config: Risk constants (reroute_radius_km)

    Returns:
        New list of the same length and order
    """
    if zones is None:
        raise ValueError("Zone registry is required")

    corrected = list(path)
    if len(corrected) < 2 or not zones:
        return corrected

    for idx, point in enumerate(corrected):
        zone = _containing_critical_zone(point, zones)
        if zone is None:
            continue
        corrected[idx] = displace_from_zone(point, zone, config.reroute_radius_km)
        logger.info("Waypoint %d moved out of %s to (%.6f, %.6f)",
                    idx, zone.name, corrected[idx].lat, corrected[idx].lng)

    return corrected
