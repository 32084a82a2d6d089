"""Table Creation Route - POST /create-table.

Invariants:
    - 200 with the success envelope, 500 with the failure envelope
    - Gateway failures never escape the handler
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from table_agent.api.dependencies import get_table_creator
from table_agent.services.table_creation import TableCreator

router = APIRouter(tags=["tables"])


@router.post("/create-table")
async def create_table(creator: TableCreator = Depends(get_table_creator)):
    """Create the Team Task List table in the configured base."""
    outcome = await creator.create()
    return JSONResponse(status_code=outcome.status_code, content=outcome.body)
