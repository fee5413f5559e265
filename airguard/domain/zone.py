"""Airspace zone domain model."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
from shapely.geometry import Polygon
from .coordinate import Coordinate


class ZoneSeverity(str, Enum):
    """Severity tier of a zone."""
    CRITICAL = "CRITICAL"  # no-fly, forces maximum risk
    RESTRICTED = "RESTRICTED"  # floors risk at the restricted level
    CONTROLLED = "CONTROLLED"  # informational only


@dataclass(frozen=True)
class Zone:
    """A named airspace polygon tagged with a severity tier."""
    id: str
    name: str
    severity: ZoneSeverity
    boundary: Tuple[Coordinate, ...]

    def __post_init__(self):
        """Normalise severity and boundary."""
        if not isinstance(self.severity, ZoneSeverity):
            object.__setattr__(self, "severity", ZoneSeverity(str(self.severity).upper()))
        object.__setattr__(self, "boundary", tuple(self.boundary))

    @property
    def is_degenerate(self) -> bool:
        """A ring needs at least 3 non-collinear points to enclose an area."""
        if len(set(self.boundary)) < 3:
            return True
        return Polygon(self.ring).area == 0

    @property
    def ring(self) -> list[tuple[float, float]]:
        """Boundary as an explicitly closed (lng, lat) ring."""
        coords = [c.to_lnglat() for c in self.boundary]
        if coords and coords[0] != coords[-1]:
            coords.append(coords[0])
        return coords

    @property
    def polygon(self) -> Optional[Polygon]:
        """Shapely polygon of the zone, or None for degenerate boundaries."""
        if self.is_degenerate:
            return None
        return Polygon(self.ring)

    @property
    def centroid(self) -> Optional[Coordinate]:
        """Area centroid of the zone polygon."""
        polygon = self.polygon
        if polygon is None or polygon.is_empty:
            return None
        point = polygon.centroid
        if point.is_empty:
            return None
        return Coordinate(lat=point.y, lng=point.x)

    def to_dict(self) -> dict:
        """Convert zone to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "severity": self.severity.value,
            "boundary": [c.to_dict() for c in self.boundary]
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Zone":
        """Create zone from dictionary."""
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            severity=data.get("severity", ZoneSeverity.CRITICAL),
            boundary=tuple(Coordinate.from_dict(c) for c in data.get("boundary", []))
        )
