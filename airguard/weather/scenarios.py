"""Synthetic weather and simulation scenarios."""
from enum import Enum
from typing import Optional
import random

from airguard.config import DEFAULT_RISK_CONFIG
from airguard.weather.weather_provider import WeatherReport, WeatherCondition


class SimScenario(str, Enum):
    """Scenario applied to the weather source and the simulator."""
    STANDARD = "STANDARD"
    HEAVY_WEATHER = "HEAVY_WEATHER"
    HIGH_ALTITUDE = "HIGH_ALTITUDE"
    EMERGENCY_LANDING = "EMERGENCY_LANDING"


def generate_weather(rng: Optional[random.Random] = None,
                     wind_speed: Optional[float] = None,
                     condition: Optional[WeatherCondition] = None,
                     visibility: float = 10.0,
                     flyable_wind_limit_kmh: float = DEFAULT_RISK_CONFIG.flyable_wind_limit_kmh) -> WeatherReport:
    """Generate a plausible weather report.

    Args:
        rng: Random source (module random if None)
        wind_speed: Fixed wind speed in km/h, random 0-19 if None
        condition: Fixed sky condition, Clear if None
        visibility: Visibility in km
        flyable_wind_limit_kmh: Wind speed at or above which flight is blocked
    """
    rng = rng or random.Random()
    if wind_speed is None:
        wind_speed = rng.randint(0, 19)
    return WeatherReport(
        temperature=22 + rng.randint(0, 4),
        wind_speed=wind_speed,
        wind_direction="N",
        visibility=visibility,
        condition=condition or WeatherCondition.CLEAR,
        is_flyable=wind_speed < flyable_wind_limit_kmh
    )


def scenario_weather(scenario: SimScenario,
                     rng: Optional[random.Random] = None) -> Optional[WeatherReport]:
    """Weather implied by a scenario.

    Returns None when the scenario leaves the current weather in place.
    """
    if scenario == SimScenario.HEAVY_WEATHER:
        return generate_weather(rng, wind_speed=30, condition=WeatherCondition.STORM, visibility=2.0)
    if scenario in (SimScenario.STANDARD, SimScenario.HIGH_ALTITUDE):
        return generate_weather(rng, wind_speed=5, condition=WeatherCondition.CLEAR)
    if scenario == SimScenario.EMERGENCY_LANDING:
        return None
    raise ValueError(f"Unknown scenario: {scenario}")
