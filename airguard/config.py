"""Configuration for the mission planner."""
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional
import os

from dotenv import load_dotenv


env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True)
class RiskConfig:
    """Regulatory constants used by the risk engine.

    Values are illustrative (modelled on Drone Rules 2021) and can be
    overridden per call by passing a modified copy.
    """
    # Altitude (Rule 33)
    altitude_ceiling_m: float = 120.0
    altitude_penalty_floor: float = 40.0
    altitude_penalty_cap: float = 60.0
    altitude_penalty_per_m: float = 0.15

    # Visual line of sight
    vlos_threshold_km: float = 2.0
    distance_penalty_per_km: float = 10.0
    distance_penalty_cap: float = 30.0

    # Zone tiers
    critical_score: float = 100.0
    restricted_floor: float = 85.0

    # Auto-reroute
    reroute_radius_km: float = 0.1

    # Weather
    flyable_wind_limit_kmh: float = 25.0
    wind_caution_kmh: float = 15.0
    wind_penalty: float = 10.0

    max_score: float = 100.0


DEFAULT_RISK_CONFIG = RiskConfig()


@dataclass(frozen=True)
class Settings:
    """Environment driven settings."""
    database_url: str = "sqlite:///airguard.db"
    gemini_api_key: Optional[str] = None
    advisory_model: str = "gemini-2.5-flash-lite"
    advisory_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    weather_base_url: str = "https://api.open-meteo.com/v1/forecast"
    log_level: str = "INFO"
    map_center_lat: float = 12.9716
    map_center_lng: float = 77.5946

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        return cls(
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            advisory_model=os.getenv("ADVISORY_MODEL", cls.advisory_model),
            advisory_base_url=os.getenv("ADVISORY_BASE_URL", cls.advisory_base_url),
            weather_base_url=os.getenv("WEATHER_BASE_URL", cls.weather_base_url),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            map_center_lat=float(os.getenv("MAP_CENTER_LAT", cls.map_center_lat)),
            map_center_lng=float(os.getenv("MAP_CENTER_LNG", cls.map_center_lng)),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get process-wide settings."""
    return Settings.from_env()
