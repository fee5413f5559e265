"""Saved mission API endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import Field
from sqlalchemy.orm import Session
from typing import List
from airguard.api.schemas import PathRequest
from airguard.domain.mission import SavedMission
from airguard.persistence.db import get_db
from airguard.persistence.repositories import MissionRepository
from airguard.risk.weather_override import assess
from airguard.zones.registry import DEFAULT_ZONES

router = APIRouter(prefix="/api/missions", tags=["missions"])


class SaveMissionRequest(PathRequest):
    name: str = Field(default="", max_length=255)


def get_repository(db: Session = Depends(get_db)) -> MissionRepository:
    return MissionRepository(db)


@router.post("/", response_model=dict, status_code=201)
def save_mission(request: SaveMissionRequest,
                 repository: MissionRepository = Depends(get_repository)):
    """Save a mission with the risk score it has right now."""
    path = request.domain_path()
    settings = request.settings.to_domain()
    weather = request.weather.to_domain() if request.weather else None
    assessment = assess(path, settings, DEFAULT_ZONES, weather)

    mission = SavedMission(
        name=request.name or f"Route {repository.count() + 1}",
        path=path,
        settings=settings,
        risk_score=assessment.score
    )
    repository.create(mission)
    return mission.to_dict()


@router.get("/", response_model=List[dict])
def list_missions(repository: MissionRepository = Depends(get_repository)):
    """List saved missions, newest first."""
    return [m.to_dict() for m in repository.list()]


@router.get("/{mission_id}", response_model=dict)
def get_mission(mission_id: str, repository: MissionRepository = Depends(get_repository)):
    """Get mission by ID."""
    mission = repository.get(mission_id)
    if mission is None:
        raise HTTPException(status_code=404, detail="Mission not found")
    return mission.to_dict()


@router.delete("/{mission_id}", response_model=dict)
def delete_mission(mission_id: str, repository: MissionRepository = Depends(get_repository)):
    """Delete a mission."""
    if not repository.delete(mission_id):
        raise HTTPException(status_code=404, detail="Mission not found")
    return {"message": "Mission deleted"}
