"""Flight path domain model."""
from dataclasses import dataclass, field
from typing import Iterator, List
from airguard.risk.geodesy import path_length_km
from .coordinate import Coordinate


@dataclass
class FlightPath:
    """Ordered waypoints of a flight; insertion order is flight order."""
    points: List[Coordinate] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Coordinate:
        return self.points[index]

    @property
    def is_flyable_shape(self) -> bool:
        """At least two points are needed to form a line."""
        return len(self.points) >= 2

    def append(self, point: Coordinate):
        """Add a waypoint at the end of the path."""
        self.points.append(point)

    def replace(self, index: int, point: Coordinate) -> bool:
        """Replace the waypoint at index. Returns False if index is out of range."""
        if not 0 <= index < len(self.points):
            return False
        self.points[index] = point
        return True

    def truncate_last(self) -> bool:
        """Remove the last waypoint. Returns False if the path is empty."""
        if not self.points:
            return False
        self.points.pop()
        return True

    def clear(self):
        """Remove all waypoints."""
        self.points.clear()

    def length_km(self) -> float:
        """Geodesic length of the path in kilometers."""
        return path_length_km(self.points)

    def to_list(self) -> List[dict]:
        """Convert path to list of dictionaries."""
        return [p.to_dict() for p in self.points]

    @classmethod
    def from_list(cls, data: List[dict]) -> "FlightPath":
        """Create path from list of dictionaries."""
        return cls(points=[Coordinate.from_dict(p) for p in data])
