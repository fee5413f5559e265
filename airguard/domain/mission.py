"""Saved mission domain model."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
import uuid
from .coordinate import Coordinate
from .drone import DroneSettings


@dataclass
class SavedMission:
    """A snapshot of a planned path, its settings and the risk at save time."""
    name: str
    path: List[Coordinate] = field(default_factory=list)
    settings: DroneSettings = field(default_factory=DroneSettings)
    risk_score: float = 0.0
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        """Initialize timestamp."""
        if self.timestamp is None:
            self.timestamp = datetime.now()

    def to_dict(self) -> dict:
        """Convert mission to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "path": [p.to_dict() for p in self.path],
            "settings": self.settings.to_dict(),
            "risk_score": self.risk_score
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SavedMission":
        """Create mission from dictionary."""
        timestamp = datetime.fromisoformat(data["timestamp"]) if data.get("timestamp") else None
        return cls(
            id=data.get("id") or str(uuid.uuid4()),
            name=data["name"],
            path=[Coordinate.from_dict(p) for p in data.get("path", [])],
            settings=DroneSettings.from_dict(data.get("settings", {})),
            risk_score=float(data.get("risk_score", 0.0)),
            timestamp=timestamp
        )
