"""Weather provider using Open Meteo API."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging

import requests

from airguard.config import DEFAULT_RISK_CONFIG, get_settings

logger = logging.getLogger(__name__)


class WeatherCondition(str, Enum):
    """Coarse sky condition."""
    CLEAR = "Clear"
    CLOUDY = "Cloudy"
    RAIN = "Rain"
    STORM = "Storm"


COMPASS_POINTS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]


@dataclass
class WeatherReport:
    """Weather at the operating area, as consumed by the risk engine."""
    temperature: float  # Celsius
    wind_speed: float  # km/h
    wind_direction: str = "N"
    visibility: float = 10.0  # km
    condition: WeatherCondition = WeatherCondition.CLEAR
    is_flyable: bool = True

    def to_dict(self) -> dict:
        """Convert report to dictionary."""
        return {
            "temperature": self.temperature,
            "wind_speed": self.wind_speed,
            "wind_direction": self.wind_direction,
            "visibility": self.visibility,
            "condition": self.condition.value,
            "is_flyable": self.is_flyable
        }


def compass_direction(degrees: float) -> str:
    """Convert a direction in degrees to an 8-point compass label."""
    return COMPASS_POINTS[int(((degrees % 360) + 22.5) // 45) % 8]


def condition_from_wmo(code: int) -> WeatherCondition:
    """Map a WMO weather code to a coarse condition."""
    if code >= 95:
        return WeatherCondition.STORM
    if code >= 51:
        return WeatherCondition.RAIN
    if code >= 2:
        return WeatherCondition.CLOUDY
    return WeatherCondition.CLEAR


class WeatherProvider:
    """Provider for current weather from Open Meteo API."""

    def __init__(self, base_url: Optional[str] = None, timeout: float = 10.0,
                 flyable_wind_limit_kmh: float = DEFAULT_RISK_CONFIG.flyable_wind_limit_kmh):
        """Initialize weather provider.

        Args:
            base_url: Base URL for Open Meteo API (default: from settings)
            timeout: Request timeout in seconds
            flyable_wind_limit_kmh: Wind speed at or above which flight is blocked
        """
        self.base_url = base_url or get_settings().weather_base_url
        self.timeout = timeout
        self.flyable_wind_limit_kmh = flyable_wind_limit_kmh

    def get_weather(self, latitude: float, longitude: float) -> Optional[WeatherReport]:
        """Get current weather conditions for a location.

        Returns:
            WeatherReport, or None if the request fails
        """
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": "temperature_2m,windspeed_10m,winddirection_10m,weathercode,visibility",
            "windspeed_unit": "kmh",
            "timezone": "auto"
        }

        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            current = response.json().get("current", {})
        except (requests.RequestException, ValueError) as e:
            logger.warning("Error fetching weather data: %s", e)
            return None

        wind_speed = float(current.get("windspeed_10m", 0.0))
        visibility_m = current.get("visibility")
        return WeatherReport(
            temperature=round(float(current.get("temperature_2m", 15.0))),
            wind_speed=round(wind_speed),
            wind_direction=compass_direction(float(current.get("winddirection_10m", 0.0))),
            visibility=(visibility_m / 1000.0) if visibility_m is not None else 10.0,
            condition=condition_from_wmo(int(current.get("weathercode", 0))),
            is_flyable=wind_speed < self.flyable_wind_limit_kmh
        )
