"""
Pydantic schemas for the /simulations endpoints.

These are NOT the engine's dataclasses. They define the HTTP API contract:
- ProcessIn: one process of the submitted workload
- SimulationRequest: what the user sends to run a simulation (request body)
- SliceOut: one contiguous run of a process on the CPU
- SimulationResponse: the trace we send back

FastAPI validates incoming data against these automatically.
If someone sends quantum=0, FastAPI returns a 422 error before our code even runs.
"""

from typing import Optional

from pydantic import BaseModel, Field

from models.enums import SchedulingPolicy

# Upper bound on workload size per request
MAX_PROCESSES = 1000


class ProcessIn(BaseModel):
    pid: int = Field(..., ge=0, examples=[1])
    arrival_time: int = Field(
        default=0,
        ge=0,
        description="Cycle at which the process becomes ready",
    )
    service_time: int = Field(
        ...,
        gt=0,
        description="CPU cycles the process needs to finish",
        examples=[5],
    )


class SimulationRequest(BaseModel):
    """Request body for POST /simulations/."""

    policy: SchedulingPolicy = SchedulingPolicy.ROUND_ROBIN
    quantum: Optional[int] = Field(
        default=None,
        gt=0,
        description="Time slice in cycles. Defaults to the configured quantum.",
    )
    processes: list[ProcessIn] = Field(..., min_length=1, max_length=MAX_PROCESSES)


class SliceOut(BaseModel):
    pid: int
    start: int   # first cycle on the CPU
    end: int     # last cycle on the CPU (inclusive)


class SimulationResponse(BaseModel):
    """Response body for POST /simulations/."""

    policy: str
    quantum: int
    total_cycles: int
    timeline: list[int]            # pid per cycle, -1 when the CPU was idle
    slices: list[SliceOut]
    end_cycles: dict[int, int]     # pid → cycle in which it finished
