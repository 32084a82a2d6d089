"""Index - static capability listing for GET /."""

from fastapi import APIRouter

router = APIRouter(tags=["status"])

SERVICE_NAME = "Airtable Table Creator Agent"

ENDPOINTS = {
    "GET /": "This status page",
    "GET /health": "Health check",
    "GET /logs": "View recent logs",
    "POST /create-table": "Create the team task list table",
    "POST /test": "Test run - creates the table",
}


@router.get("/")
async def index():
    """List the service's routes."""
    return {"status": SERVICE_NAME, "endpoints": ENDPOINTS}
