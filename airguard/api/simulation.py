"""Simulation API endpoints."""
from fastapi import APIRouter, HTTPException
from pydantic import Field
from typing import Optional
import random
from airguard.api.schemas import PathRequest
from airguard.simulation.simulator import FlightSimulator, MAX_STEP_SECONDS
from airguard.weather.scenarios import SimScenario

router = APIRouter(prefix="/api/simulation", tags=["simulation"])


class SimulationRequest(PathRequest):
    scenario: SimScenario = SimScenario.STANDARD
    speed_multiplier: float = Field(default=1.0, gt=0, le=100)
    step_seconds: float = Field(default=MAX_STEP_SECONDS, gt=0)
    max_frames: int = Field(default=2000, gt=0, le=20000)
    seed: Optional[int] = None


@router.post("/", response_model=dict)
async def simulate(request: SimulationRequest):
    """Run the canned simulator over a path and return the frames."""
    try:
        simulator = FlightSimulator(
            request.domain_path(),
            request.settings.to_domain(),
            scenario=request.scenario,
            speed_multiplier=request.speed_multiplier,
            rng=random.Random(request.seed)
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    frames = [frame.to_dict() for frame in simulator.run(request.step_seconds, request.max_frames)]
    return {
        "total_distance_m": simulator.total_length_m,
        "finished": simulator.finished,
        "frames": frames
    }
