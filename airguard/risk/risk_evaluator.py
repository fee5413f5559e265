"""Flight path risk evaluator.

Scoring is tiered and applied in a fixed order:

1. altitude above the regulatory ceiling adds a scaled penalty
2. path length beyond visual line of sight adds a scaled penalty
3. zones, in registry order: CRITICAL overrides the score to the maximum,
   RESTRICTED raises it to a floor, CONTROLLED has no effect
4. the result is clamped to [0, max_score] and rounded to 2 decimals
"""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple
import logging

from airguard.config import RiskConfig, DEFAULT_RISK_CONFIG
from airguard.domain.coordinate import Coordinate
from airguard.domain.drone import DroneSettings
from airguard.domain.zone import Zone, ZoneSeverity
from airguard.risk.geodesy import path_length_km
from airguard.risk.geometry import path_intersects_zone

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Render a number in full: whole values without a decimal point, others unrounded."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass
class RiskAssessment:
    """Risk score (0-100) and the violations that produced it."""
    score: float = 0.0
    violations: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert assessment to dictionary."""
        return {"score": self.score, "violations": list(self.violations)}


def altitude_penalty(altitude: float,
                     config: RiskConfig = DEFAULT_RISK_CONFIG) -> Tuple[float, Optional[str]]:
    """Penalty and violation for flying above the altitude ceiling."""
    if altitude <= config.altitude_ceiling_m:
        return 0.0, None

    excess = altitude - config.altitude_ceiling_m
    penalty = min(config.altitude_penalty_cap,
                  config.altitude_penalty_floor + excess * config.altitude_penalty_per_m)
    message = (f"RULE_33_VIOLATION: {format_number(altitude)}m exceeds "
               f"{format_number(config.altitude_ceiling_m)}m limit.")
    return penalty, message


def distance_penalty(length_km: float,
                     config: RiskConfig = DEFAULT_RISK_CONFIG) -> Tuple[float, Optional[str]]:
    """Penalty and violation for paths longer than the VLOS threshold."""
    if length_km <= config.vlos_threshold_km:
        return 0.0, None

    penalty = min(config.distance_penalty_cap,
                  (length_km - config.vlos_threshold_km) * config.distance_penalty_per_km)
    message = f"BVLOS_WARNING: Distance {length_km:.2f}km may exceed Visual Line of Sight."
    return penalty, message


def apply_zone_tier(score: float, zone: Zone,
                    config: RiskConfig = DEFAULT_RISK_CONFIG) -> Tuple[float, Optional[str]]:
    """Apply the effect of an intersected zone to the running score.

    Args:
        score: Running score before this zone
        zone: Zone that the path intersects
        config: Risk constants

    Returns:
        (new_score, violation or None)
    """
    if zone.severity == ZoneSeverity.CRITICAL:
        return config.critical_score, f"NFZ_BREACH: Intersects Critical Zone ({zone.name})."
    if zone.severity == ZoneSeverity.RESTRICTED:
        return max(score, config.restricted_floor), f"AIRSPACE_CAUTION: Entry into {zone.name}."
    return score, None


def finalize_score(score: float, config: RiskConfig = DEFAULT_RISK_CONFIG) -> float:
    """Clamp to [0, max_score] and round to two decimals."""
    return round(min(max(score, 0.0), config.max_score), 2)


def evaluate(path: Sequence[Coordinate], settings: DroneSettings,
             zones: Sequence[Zone],
             config: RiskConfig = DEFAULT_RISK_CONFIG) -> RiskAssessment:
    """Evaluate the risk of flying a path.

    Args:
        path: Ordered waypoints
        settings: Drone configuration (altitude, model)
        zones: Zone registry, iterated in order
        config: Risk constants

    Returns:
        RiskAssessment with score and ordered violations
    """
    if zones is None:
        raise ValueError("Zone registry is required")

    if len(path) < 2:
        return RiskAssessment()

    score = 0.0
    violations: List[str] = []

    penalty, message = altitude_penalty(settings.altitude, config)
    if message:
        score += penalty
        violations.append(message)

    length_km = path_length_km(path)
    penalty, message = distance_penalty(length_km, config)
    if message:
        score += penalty
        violations.append(message)

    for zone in zones:
        if path_intersects_zone(path, zone):
            score, message = apply_zone_tier(score, zone, config)
            if message:
                violations.append(message)

    final_score = finalize_score(score, config)
    logger.debug("Evaluated %d-point path (%.3f km): score=%s violations=%d",
                 len(path), length_km, final_score, len(violations))
    return RiskAssessment(score=final_score, violations=violations)
