"""
Pydantic schemas for the /scheduler endpoints.

SchedulerStatus: response showing the scheduling defaults.
"""

from pydantic import BaseModel


class SchedulerStatus(BaseModel):
    """Response body for GET /scheduler/status."""

    current_policy: str
    quantum: int                   # default Round Robin quantum (cycles)
    available_policies: list[str]
