"""Zone registry API endpoints."""
from fastapi import APIRouter
from typing import List
from airguard.zones.registry import DEFAULT_ZONES

router = APIRouter(prefix="/api/zones", tags=["zones"])


@router.get("/", response_model=List[dict])
async def list_zones():
    """List restricted airspace zones in registry order."""
    return [zone.to_dict() for zone in DEFAULT_ZONES]
