"""Risk assessment API endpoints."""
from fastapi import APIRouter
from airguard.api.schemas import PathRequest, AssessmentResponse
from airguard.risk.reroute import reroute
from airguard.risk.weather_override import assess
from airguard.zones.registry import DEFAULT_ZONES

router = APIRouter(prefix="/api/risk", tags=["risk"])


@router.post("/evaluate", response_model=AssessmentResponse)
async def evaluate_path(request: PathRequest):
    """Score a path against the zone registry and optional weather."""
    weather = request.weather.to_domain() if request.weather else None
    assessment = assess(request.domain_path(), request.settings.to_domain(),
                        DEFAULT_ZONES, weather)
    return assessment.to_dict()


@router.post("/reroute", response_model=dict)
async def reroute_path(request: PathRequest):
    """Move waypoints out of critical zones and score the corrected path."""
    corrected = reroute(request.domain_path(), DEFAULT_ZONES)
    weather = request.weather.to_domain() if request.weather else None
    assessment = assess(corrected, request.settings.to_domain(), DEFAULT_ZONES, weather)
    return {
        "path": [p.to_dict() for p in corrected],
        "assessment": assessment.to_dict()
    }
