"""
Simulation endpoints.

POST /simulations/ → Run a workload through a scheduling policy and return the trace

The API layer is intentionally thin:
- Validate input (Pydantic does this automatically)
- Build a fresh policy + engine for the request
- Return the trace

Nothing is stored between requests: each simulation is independent.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_settings
from api.schemas.simulation import SimulationRequest, SimulationResponse, SliceOut
from config.settings import Settings
from models.process import ProcessSpec
from scheduler.engine import SimulationEngine
from scheduler.exceptions import SimulationError
from scheduler.registry import create_policy

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/simulations", tags=["simulations"])


@router.post("/", response_model=SimulationResponse)
def run_simulation(
    request: SimulationRequest,
    config: Settings = Depends(get_settings),
) -> SimulationResponse:
    """
    Run one simulation.

    A plain def, so FastAPI runs the CPU-bound simulation in its
    threadpool rather than on the event loop.

    The quantum falls back to the configured default when the request
    leaves it out. Duplicate pids in the workload are rejected with 422,
    same as any other invalid input.
    """
    quantum = request.quantum if request.quantum is not None else config.ROUND_ROBIN_TIME_QUANTUM

    try:
        policy = create_policy(request.policy, quantum=quantum)
        engine = SimulationEngine(policy, max_cycles=config.MAX_SIMULATION_CYCLES)
        trace = engine.run(
            ProcessSpec(
                pid=p.pid,
                arrival_time=p.arrival_time,
                service_time=p.service_time,
            )
            for p in request.processes
        )
    except ValueError as e:  # InvalidConfiguration is a ValueError too
        raise HTTPException(status_code=422, detail=str(e))
    except SimulationError as e:
        logger.warning(f"Simulation aborted: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return SimulationResponse(
        policy=trace.policy_name,
        quantum=quantum,
        total_cycles=trace.total_cycles,
        timeline=trace.timeline,
        slices=[SliceOut(pid=pid, start=start, end=end) for pid, start, end in trace.slices],
        end_cycles=trace.end_cycles,
    )
