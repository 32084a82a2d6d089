"""Service test fixtures - mocked Airtable transport + FastAPI test client.

Invariants:
    - Airtable is never called: AirtableClient gets an httpx.MockTransport
    - Each test gets a fresh app, activity log and components on app.state
    - airtable.requests records every outbound request for assertions
"""

import json

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from table_agent.config import AIRTABLE_BASE_ID
from table_agent.core.activity_log import ActivityLog
from table_agent.infrastructure.airtable_client import AirtableClient
from table_agent.main import create_app
from table_agent.services.self_test import SelfTester
from table_agent.services.table_creation import TableCreator

TOKEN = "pat-test-fake-token"


def created_table_body(table_id="tbl123", field_count=11):
    return {
        "id": table_id,
        "name": "Team Task List",
        "fields": [
            {"id": f"fld{i}", "name": f"Field {i}", "type": "singleLineText"}
            for i in range(field_count)
        ],
    }


class FakeAirtable:
    """Programmable stand-in for the Airtable metadata API."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = created_table_body()
        self.error: Exception | None = None

    def respond(self, status_code, body):
        self.status_code = status_code
        self.body = body

    def fail_with(self, error: Exception):
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.body)

    def sent_payload(self, index=-1) -> dict:
        return json.loads(self.requests[index].content)


@pytest.fixture
def airtable():
    return FakeAirtable()


@pytest.fixture
def activity_log():
    return ActivityLog()


@pytest.fixture
async def airtable_client(airtable):
    client = AirtableClient(
        base_id=AIRTABLE_BASE_ID,
        token=TOKEN,
        transport=httpx.MockTransport(airtable.handler),
    )
    yield client
    await client.aclose()


@pytest.fixture
def creator(activity_log, airtable_client):
    return TableCreator(activity_log, airtable_client)


@pytest.fixture
def app(activity_log, creator):
    """App with components wired by hand (ASGITransport skips the lifespan)."""
    application = create_app()
    application.state.activity_log = activity_log
    application.state.table_creator = creator
    application.state.self_tester = SelfTester(
        activity_log, creator, mode="in_process",
    )
    return application


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
