"""Coordinate domain model."""
from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 latitude/longitude pair in degrees."""
    lat: float
    lng: float

    def __post_init__(self):
        """Validate coordinate values."""
        if not (math.isfinite(self.lat) and math.isfinite(self.lng)):
            raise ValueError(f"Coordinate must be finite, got ({self.lat}, {self.lng})")
        if not -90 <= self.lat <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {self.lat}")
        if not -180 <= self.lng <= 180:
            raise ValueError(f"Longitude must be between -180 and 180, got {self.lng}")

    def to_lnglat(self) -> tuple[float, float]:
        """Return (x, y) order used by shapely and GeoJSON."""
        return (self.lng, self.lat)

    def to_dict(self) -> dict:
        """Convert coordinate to dictionary."""
        return {"lat": self.lat, "lng": self.lng}

    @classmethod
    def from_dict(cls, data: dict) -> "Coordinate":
        """Create coordinate from dictionary."""
        return cls(lat=float(data["lat"]), lng=float(data["lng"]))
