"""Health Probe - liveness endpoint.

Invariants:
    - GET /health always returns 200 while the process is up
    - Reports the configured Airtable base id; does not call Airtable
"""

from fastapi import APIRouter, Depends, status

from table_agent.api.dependencies import get_app_settings
from table_agent.core.activity_log import utc_timestamp
from table_agent.config import Settings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Basic liveness probe."""
    return {
        "status": "healthy",
        "timestamp": utc_timestamp(),
        "base_id": settings.base_id,
    }
