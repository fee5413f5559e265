"""Drone configuration domain model."""
from dataclasses import dataclass, replace
from enum import Enum
import math


class DroneClass(str, Enum):
    """Weight class of the drone."""
    LIGHT = "Nano (<250g)"
    HEAVY = "Micro (>2kg)"


# Nominal cruise speeds used by the simulator (m/s)
NOMINAL_SPEEDS = {
    DroneClass.LIGHT: 80.0,
    DroneClass.HEAVY: 140.0,
}


@dataclass(frozen=True)
class DroneSettings:
    """Operating configuration of the drone for a mission."""
    altitude: float = 40.0  # meters AGL
    model: DroneClass = DroneClass.LIGHT

    def __post_init__(self):
        """Validate settings."""
        if not isinstance(self.model, DroneClass):
            # Accepts the enum value or name, e.g. "Nano (<250g)" or "LIGHT"
            object.__setattr__(self, "model", _parse_drone_class(self.model))
        if not math.isfinite(self.altitude):
            raise ValueError(f"Altitude must be finite, got {self.altitude}")
        if self.altitude < 0:
            raise ValueError(f"Altitude must be non-negative, got {self.altitude}")

    @property
    def nominal_speed_ms(self) -> float:
        """Nominal cruise speed in m/s."""
        return NOMINAL_SPEEDS[self.model]

    def updated(self, **changes) -> "DroneSettings":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Convert settings to dictionary."""
        return {"altitude": self.altitude, "model": self.model.value}

    @classmethod
    def from_dict(cls, data: dict) -> "DroneSettings":
        """Create settings from dictionary."""
        return cls(
            altitude=float(data.get("altitude", 40.0)),
            model=data.get("model", DroneClass.LIGHT)
        )


def _parse_drone_class(value) -> DroneClass:
    try:
        return DroneClass(value)
    except ValueError:
        pass
    try:
        return DroneClass[str(value).upper()]
    except KeyError:
        raise ValueError(f"Unknown drone model: {value}") from None
