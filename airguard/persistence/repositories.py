"""Repository pattern for database operations."""
from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from airguard.domain.coordinate import Coordinate
from airguard.domain.drone import DroneSettings
from airguard.domain.mission import SavedMission
from airguard.persistence.models import SavedMissionModel

logger = logging.getLogger(__name__)


class MissionRepository:
    """Repository for saved mission operations."""

    def __init__(self, db: Session):
        """Initialize repository.

        Args:
            db: Database session
        """
        self.db = db

    def create(self, mission: SavedMission) -> SavedMission:
        """Store a mission.

        Args:
            mission: SavedMission domain object

        Returns:
            The stored mission
        """
        model = SavedMissionModel(
            id=mission.id,
            name=mission.name,
            created_at=mission.timestamp,
            path=[p.to_dict() for p in mission.path],
            settings=mission.settings.to_dict(),
            risk_score=mission.risk_score
        )
        self.db.add(model)
        self.db.commit()
        logger.info("Saved mission %s (%s)", mission.name, mission.id)
        return mission

    def get(self, mission_id: str) -> Optional[SavedMission]:
        """Get mission by ID."""
        model = self.db.get(SavedMissionModel, mission_id)
        if model is None:
            return None
        return self._to_domain(model)

    def list(self) -> List[SavedMission]:
        """List all missions, newest first."""
        models = (
            self.db.query(SavedMissionModel)
            .order_by(SavedMissionModel.created_at.desc())
            .all()
        )
        return [self._to_domain(m) for m in models]

    def count(self) -> int:
        """Number of stored missions."""
        return self.db.query(SavedMissionModel).count()

    def delete(self, mission_id: str) -> bool:
        """Delete mission by ID. Returns False if it does not exist."""
        model = self.db.get(SavedMissionModel, mission_id)
        if model is None:
            return False
        self.db.delete(model)
        self.db.commit()
        logger.info("Deleted mission %s", mission_id)
        return True

    @staticmethod
    def _to_domain(model: SavedMissionModel) -> SavedMission:
        return SavedMission(
            id=model.id,
            name=model.name,
            timestamp=model.created_at,
            path=[Coordinate.from_dict(p) for p in model.path or []],
            settings=DroneSettings.from_dict(model.settings or {}),
            risk_score=model.risk_score
        )
