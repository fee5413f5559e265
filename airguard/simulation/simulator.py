"""Canned flight simulator that moves a drone along a planned path."""
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence
import random

from airguard.domain.coordinate import Coordinate
from airguard.domain.drone import DroneSettings
from airguard.risk.geodesy import along, bearing_deg, path_length_km
from airguard.weather.scenarios import SimScenario

# Cap on a single step so a stalled caller does not teleport the drone
MAX_STEP_SECONDS = 0.1

HEAVY_WEATHER_JITTER_DEG = 0.0004
HEAVY_WEATHER_ALTITUDE_JITTER_M = 6.0
LOOK_AHEAD_KM = 0.002


@dataclass
class Telemetry:
    """Simulated telemetry at a point in time."""
    speed: float = 0.0  # km/h
    heading: float = 0.0  # degrees
    battery: float = 100.0  # percent
    altitude_agl: float = 0.0  # meters
    signal_strength: float = 100.0  # percent
    sat_count: int = 15

    def to_dict(self) -> dict:
        """Convert telemetry to dictionary."""
        return {
            "speed": self.speed,
            "heading": self.heading,
            "battery": self.battery,
            "altitude_agl": self.altitude_agl,
            "signal_strength": self.signal_strength,
            "sat_count": self.sat_count
        }


@dataclass
class SimulationFrame:
    """State of the simulation after one step."""
    progress: float
    position: Optional[Coordinate]
    telemetry: Telemetry = field(default_factory=Telemetry)
    finished: bool = False

    def to_dict(self) -> dict:
        """Convert frame to dictionary."""
        return {
            "progress": self.progress,
            "position": self.position.to_dict() if self.position else None,
            "telemetry": self.telemetry.to_dict(),
            "finished": self.finished
        }


class FlightSimulator:
    """Interpolates a moving position along a path over time."""

    def __init__(self, path: Sequence[Coordinate], settings: DroneSettings,
                 scenario: SimScenario = SimScenario.STANDARD,
                 speed_multiplier: float = 1.0,
                 rng: Optional[random.Random] = None):
        """Initialize simulator.

        Args:
            path: Ordered waypoints (at least 2)
            settings: Drone configuration, selects the nominal speed
            scenario: Scenario controlling jitter and battery drain
            speed_multiplier: Playback speed factor
            rng: Random source for cosmetic jitter
        """
        if len(path) < 2:
            raise ValueError("A path needs at least 2 points to be simulated")
        if speed_multiplier <= 0:
            raise ValueError(f"speed_multiplier must be positive, got {speed_multiplier}")

        self.path: List[Coordinate] = list(path)
        self.settings = settings
        self.scenario = SimScenario(scenario)
        self.speed_multiplier = speed_multiplier
        self.rng = rng or random.Random()

        self.total_length_m = path_length_km(self.path) * 1000.0
        self.distance_m = 0.0
        self.finished = False

    @property
    def speed_ms(self) -> float:
        """Current ground speed in m/s."""
        return self.settings.nominal_speed_ms * self.speed_multiplier

    @property
    def progress(self) -> float:
        if self.total_length_m <= 0:
            return 1.0
        return min(self.distance_m / self.total_length_m, 1.0)

    def step(self, dt_seconds: float) -> SimulationFrame:
        """Advance the simulation by dt_seconds (capped) and return the new frame."""
        if self.finished:
            return SimulationFrame(progress=1.0, position=None, finished=True)

        dt = min(max(dt_seconds, 0.0), MAX_STEP_SECONDS)
        self.distance_m += dt * self.speed_ms

        if self.progress >= 1.0:
            self.finished = True
            return SimulationFrame(progress=1.0, position=None, finished=True)

        distance_km = self.distance_m / 1000.0
        current = along(self.path, distance_km)
        look_ahead = along(self.path, min(distance_km + LOOK_AHEAD_KM, self.total_length_m / 1000.0))
        heading = bearing_deg(current, look_ahead) if look_ahead != current else 0.0

        position = current
        altitude = self.settings.altitude
        if self.scenario == SimScenario.HEAVY_WEATHER:
            position = Coordinate(
                lat=current.lat + (self.rng.random() - 0.5) * HEAVY_WEATHER_JITTER_DEG,
                lng=current.lng + (self.rng.random() - 0.5) * HEAVY_WEATHER_JITTER_DEG,
            )
            altitude += (self.rng.random() - 0.5) * HEAVY_WEATHER_ALTITUDE_JITTER_M

        progress = self.progress
        drain = 95.0 if self.scenario == SimScenario.EMERGENCY_LANDING else 5.0

        telemetry = Telemetry(
            speed=self.speed_ms * 3.6,
            heading=heading,
            battery=max(0.0, 100.0 - progress * drain),
            altitude_agl=altitude,
            signal_strength=max(5.0, 100.0 - self.distance_m / 120.0),
            sat_count=18 + self.rng.randint(0, 3),
        )
        return SimulationFrame(progress=progress, position=position, telemetry=telemetry)

    def run(self, step_seconds: float = MAX_STEP_SECONDS,
            max_frames: Optional[int] = None) -> Iterator[SimulationFrame]:
        """Frames until the end of the path (or max_frames).

        Raises ValueError for a non-positive step, which would never finish.
        """
        if step_seconds <= 0:
            raise ValueError(f"step_seconds must be positive, got {step_seconds}")
        return self._frames(step_seconds, max_frames)

    def _frames(self, step_seconds: float, max_frames: Optional[int]) -> Iterator[SimulationFrame]:
        count = 0
        while not self.finished:
            if max_frames is not None and count >= max_frames:
                return
            yield self.step(step_seconds)
            count += 1
