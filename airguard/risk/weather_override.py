"""Weather adjustments applied on top of the geometric risk."""
from typing import Optional, Sequence

from airguard.config import RiskConfig, DEFAULT_RISK_CONFIG
from airguard.domain.coordinate import Coordinate
from airguard.domain.drone import DroneSettings
from airguard.domain.zone import Zone
from airguard.risk.risk_evaluator import (
    RiskAssessment, evaluate, finalize_score, format_number
)
from airguard.weather.weather_provider import WeatherReport


def apply_weather(assessment: RiskAssessment, weather: Optional[WeatherReport],
                  config: RiskConfig = DEFAULT_RISK_CONFIG) -> RiskAssessment:
    """Fold weather into a geometric assessment.

    Unflyable weather forces the maximum score. Strong but flyable wind adds
    a fixed penalty. Weather violations always follow geometry violations.
    """
    if weather is None:
        return RiskAssessment(score=assessment.score, violations=list(assessment.violations))

    violations = list(assessment.violations)
    score = assessment.score

    if not weather.is_flyable:
        score = config.max_score
        violations.append(
            f"Flight blocked: Current wind speed ({format_number(weather.wind_speed)} km/h) "
            "is too dangerous."
        )
    elif weather.wind_speed > config.wind_caution_kmh:
        score += config.wind_penalty
        violations.append(
            f"WIND_CAUTION: Wind speed {format_number(weather.wind_speed)} km/h "
            "may destabilise the aircraft."
        )

    return RiskAssessment(score=finalize_score(score, config), violations=violations)


def assess(path: Sequence[Coordinate], settings: DroneSettings, zones: Sequence[Zone],
           weather: Optional[WeatherReport] = None,
           config: RiskConfig = DEFAULT_RISK_CONFIG) -> RiskAssessment:
    """Evaluate geometry first, then weather."""
    return apply_weather(evaluate(path, settings, zones, config), weather, config)
