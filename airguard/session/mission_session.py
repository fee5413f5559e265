"""Mission planning session state.

One MissionSession holds everything the planning UI works on. Risk is
recomputed synchronously after every path, settings or weather change; the
risk engine itself stays stateless and only receives the fields it needs.
"""
from dataclasses import dataclass, fields
from typing import List, Optional, Sequence
import logging
import random

from airguard.config import RiskConfig, DEFAULT_RISK_CONFIG, get_settings
from airguard.domain.coordinate import Coordinate
from airguard.domain.drone import DroneSettings
from airguard.domain.flight_path import FlightPath
from airguard.domain.mission import SavedMission
from airguard.domain.zone import Zone
from airguard.persistence.repositories import MissionRepository
from airguard.risk.reroute import reroute
from airguard.risk.weather_override import assess
from airguard.weather.scenarios import SimScenario, generate_weather, scenario_weather
from airguard.weather.weather_provider import WeatherProvider, WeatherReport
from airguard.zones.registry import DEFAULT_ZONES

logger = logging.getLogger(__name__)


@dataclass
class PreFlightChecklist:
    """Manual checks required before a simulation may start."""
    battery_checked: bool = False
    propellers_inspected: bool = False
    gps_lock: bool = False
    permit_checked: bool = False
    software_updated: bool = False

    @property
    def is_complete(self) -> bool:
        return all(getattr(self, f.name) for f in fields(self))

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


class MissionSession:
    """Planning state for a single user session."""

    def __init__(self, zones: Sequence[Zone] = DEFAULT_ZONES,
                 settings: Optional[DroneSettings] = None,
                 weather: Optional[WeatherReport] = None,
                 config: RiskConfig = DEFAULT_RISK_CONFIG,
                 rng: Optional[random.Random] = None):
        """Initialize session.

        Args:
            zones: Zone registry used for every assessment
            settings: Initial drone settings
            weather: Initial weather (synthetic if None)
            config: Risk constants
            rng: Random source for synthetic weather
        """
        self.zones = tuple(zones)
        self.config = config
        self.rng = rng or random.Random()

        self.flight_path = FlightPath()
        self.drone_settings = settings or DroneSettings()
        self.weather = weather or generate_weather(
            self.rng, flyable_wind_limit_kmh=config.flyable_wind_limit_kmh)
        self.risk_level = 0.0
        self.violations: List[str] = []

        self.checklist = PreFlightChecklist()
        self.selected_waypoint_index: Optional[int] = None
        self.is_simulating = False
        self.active_scenario = SimScenario.STANDARD

    # Path editing

    def add_point(self, point: Coordinate):
        self.flight_path.append(point)
        self.calculate_risk()

    def update_point(self, index: int, point: Coordinate) -> bool:
        """Move a waypoint. Out-of-range indexes are ignored."""
        if not self.flight_path.replace(index, point):
            return False
        self.calculate_risk()
        return True

    def remove_last_point(self):
        self.flight_path.truncate_last()
        self.calculate_risk()

    def clear_path(self):
        """Reset the path and everything derived from it."""
        self.flight_path.clear()
        self.risk_level = 0.0
        self.violations = []
        self.selected_waypoint_index = None
        self.is_simulating = False
        self.checklist = PreFlightChecklist()

    def set_selected_waypoint(self, index: Optional[int]):
        self.selected_waypoint_index = index

    def update_settings(self, **changes):
        """Merge changes into the drone settings, e.g. update_settings(altitude=150)."""
        self.drone_settings = self.drone_settings.updated(**changes)
        self.calculate_risk()

    # Risk

    def calculate_risk(self):
        """Recompute risk level and violations from the current state."""
        assessment = assess(self.flight_path.points, self.drone_settings, self.zones,
                            self.weather, self.config)
        self.risk_level = assessment.score
        self.violations = assessment.violations

    def auto_fix_path(self):
        """Move waypoints out of critical zones, then re-score."""
        fixed = reroute(self.flight_path.points, self.zones, self.config)
        self.flight_path = FlightPath(points=fixed)
        self.calculate_risk()

    # Weather

    def refresh_weather(self, provider: Optional[WeatherProvider] = None,
                        latitude: Optional[float] = None, longitude: Optional[float] = None):
        """Fetch live weather, falling back to synthetic weather on failure.

        The location defaults to the first waypoint, then to the map center.
        """
        weather = None
        if provider is not None:
            if latitude is None or longitude is None:
                latitude, longitude = self._weather_location()
            weather = provider.get_weather(latitude, longitude)
        if weather is None:
            logger.info("Using synthetic weather")
            weather = generate_weather(self.rng,
                                       flyable_wind_limit_kmh=self.config.flyable_wind_limit_kmh)
        self.weather = weather
        self.calculate_risk()

    def apply_scenario(self, scenario: SimScenario):
        self.active_scenario = SimScenario(scenario)
        weather = scenario_weather(self.active_scenario, self.rng)
        if weather is not None:
            self.weather = weather
        self.calculate_risk()

    def _weather_location(self) -> tuple[float, float]:
        if len(self.flight_path):
            first = self.flight_path[0]
            return first.lat, first.lng
        settings = get_settings()
        return settings.map_center_lat, settings.map_center_lng

    # Checklist and simulation

    def toggle_checklist_item(self, item: str):
        if item not in self.checklist.to_dict():
            raise ValueError(f"Unknown checklist item: {item}")
        setattr(self.checklist, item, not getattr(self.checklist, item))

    def auto_check_checklist(self):
        for name in self.checklist.to_dict():
            setattr(self.checklist, name, True)

    def start_simulation(self) -> bool:
        """Start a simulation if the checklist is complete and the path is flyable."""
        if not self.checklist.is_complete:
            return False
        if not self.flight_path.is_flyable_shape:
            return False
        self.is_simulating = True
        return True

    def stop_simulation(self):
        self.is_simulating = False

    # Persistence

    def save_mission(self, repository: MissionRepository, name: str = "") -> SavedMission:
        """Save the current path and settings. Empty names become "Route N"."""
        mission_name = name or f"Route {repository.count() + 1}"
        mission = SavedMission(
            name=mission_name,
            path=list(self.flight_path.points),
            settings=self.drone_settings,
            risk_score=self.risk_level
        )
        return repository.create(mission)

    def load_mission(self, repository: MissionRepository, mission_id: str) -> bool:
        """Replace the path and settings with a saved mission."""
        mission = repository.get(mission_id)
        if mission is None:
            return False
        self.flight_path = FlightPath(points=list(mission.path))
        self.drone_settings = mission.settings
        self.selected_waypoint_index = None
        self.is_simulating = False
        self.calculate_risk()
        return True

    def to_dict(self) -> dict:
        """Snapshot of the session state."""
        return {
            "flight_path": self.flight_path.to_list(),
            "drone_settings": self.drone_settings.to_dict(),
            "weather": self.weather.to_dict(),
            "risk_level": self.risk_level,
            "violations": list(self.violations),
            "checklist": self.checklist.to_dict(),
            "selected_waypoint_index": self.selected_waypoint_index,
            "is_simulating": self.is_simulating,
            "active_scenario": self.active_scenario.value
        }
