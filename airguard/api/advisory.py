"""Advisory API endpoints."""
from fastapi import APIRouter, Depends
from pydantic import Field
from airguard.advisory.advisor import AdvisoryClient, AdvisoryContext
from airguard.api.schemas import PathRequest
from airguard.risk.weather_override import assess
from airguard.zones.registry import DEFAULT_ZONES

router = APIRouter(prefix="/api/advisory", tags=["advisory"])


class AdvisoryRequest(PathRequest):
    message: str = Field(min_length=1)


def get_advisory_client() -> AdvisoryClient:
    return AdvisoryClient()


@router.post("/", response_model=dict)
def ask_advisor(request: AdvisoryRequest,
                client: AdvisoryClient = Depends(get_advisory_client)):
    """Ask the safety advisor about the current path."""
    path = request.domain_path()
    settings = request.settings.to_domain()
    weather = request.weather.to_domain() if request.weather else None
    assessment = assess(path, settings, DEFAULT_ZONES, weather)

    context = AdvisoryContext(
        risk_level=assessment.score,
        violations=assessment.violations,
        settings=settings,
        weather=weather,
        path=path,
        zones=DEFAULT_ZONES
    )
    reply = client.ask(request.message, context)
    return {"reply": reply, "assessment": assessment.to_dict()}
