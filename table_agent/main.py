"""Airtable Table Creator Agent - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Components built once in the lifespan and stored on app.state
    - The shared Airtable httpx client is closed on shutdown
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from table_agent.api.error_handlers import register_error_handlers
from table_agent.api.routes import health, index, logs, self_test, tables
from table_agent.config import Settings, get_settings
from table_agent.core.activity_log import ActivityLog
from table_agent.infrastructure.airtable_client import AirtableClient
from table_agent.infrastructure.observability import setup_logging
from table_agent.services.self_test import SelfTester
from table_agent.services.table_creation import TableCreator

logger = logging.getLogger(__name__)


def build_components(app: FastAPI, settings: Settings) -> AirtableClient:
    """Construct the activity log, gateway and use-cases onto app.state."""
    activity_log = ActivityLog(capacity=settings.activity_log_capacity)
    client = AirtableClient(
        base_id=settings.base_id,
        token=settings.airtable_pat,
        api_url=settings.airtable_api_url,
        timeout_seconds=settings.airtable_timeout_seconds,
    )
    creator = TableCreator(activity_log, client)
    app.state.activity_log = activity_log
    app.state.table_creator = creator
    app.state.self_tester = SelfTester(
        activity_log,
        creator,
        mode=settings.self_test_mode,
        loopback_url=f"http://127.0.0.1:{settings.port}",
        timeout_seconds=settings.airtable_timeout_seconds + 5,
    )
    return client


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    client = build_components(app, settings)
    app.state.activity_log.log(
        f"Airtable Table Creator Agent listening on port {settings.port}",
    )
    yield
    await client.aclose()
    logger.info("Airtable Table Creator Agent shutting down")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Airtable Table Creator Agent", version="1.0.0", lifespan=lifespan,
    )
    app.include_router(index.router)
    app.include_router(health.router)
    app.include_router(logs.router)
    app.include_router(tables.router)
    app.include_router(self_test.router)
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
