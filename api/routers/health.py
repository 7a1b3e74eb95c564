"""
Health check endpoint.

The simulator has no database or broker behind it, so being able to answer
the request is the whole check. Load balancers and container orchestrators
use it to decide if the service is ready to receive traffic.
"""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    return {"status": "healthy"}
