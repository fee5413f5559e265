"""Visualization API endpoints."""
from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from airguard.api.schemas import PathRequest
from airguard.risk.weather_override import assess
from airguard.visualization.map_renderer import MapRenderer
from airguard.zones.registry import DEFAULT_ZONES

router = APIRouter(prefix="/api/visualization", tags=["visualization"])


@router.post("/map", response_class=HTMLResponse)
async def visualize_path(request: PathRequest):
    """Get HTML map with the zones and the path."""
    path = request.domain_path()
    weather = request.weather.to_domain() if request.weather else None
    assessment = assess(path, request.settings.to_domain(), DEFAULT_ZONES, weather)

    renderer = MapRenderer()
    map_obj = renderer.render(path, DEFAULT_ZONES, assessment)

    return map_obj._repr_html_()
