"""
Scheduler info endpoint.

GET /scheduler/status → default policy and quantum used when a simulation
request doesn't specify them, plus the policies that are available.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_settings
from api.schemas.scheduler import SchedulerStatus
from config.settings import Settings
from models.enums import SchedulingPolicy

router = APIRouter(prefix="/scheduler", tags=["scheduler"])


@router.get("/status", response_model=SchedulerStatus)
async def get_scheduler_status(
    config: Settings = Depends(get_settings),
) -> SchedulerStatus:
    """Get the scheduling defaults."""
    return SchedulerStatus(
        current_policy=config.DEFAULT_SCHEDULING_POLICY,
        quantum=config.ROUND_ROBIN_TIME_QUANTUM,
        available_policies=[p.value for p in SchedulingPolicy],
    )
