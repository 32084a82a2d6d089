"""Recent Activity - read-only view of the activity log.

Invariants:
    - Returns at most RECENT_LOGS_LIMIT entries, oldest first
    - total_logs is the number of entries currently held (never above capacity)
    - lifetime_logs counts every entry since process start
"""

from fastapi import APIRouter, Depends

from table_agent.api.dependencies import get_activity_log
from table_agent.core.activity_log import ActivityLog

router = APIRouter(prefix="/logs", tags=["logs"])

RECENT_LOGS_LIMIT = 20


@router.get("")
async def recent_logs(activity_log: ActivityLog = Depends(get_activity_log)):
    return {
        "logs": activity_log.recent(RECENT_LOGS_LIMIT),
        "total_logs": activity_log.stored_count,
        "lifetime_logs": activity_log.lifetime_count,
    }
