"""POST /test - wraps the creation route's result, in-process and over loopback.

Invariants:
    - result equals what POST /create-table returns standalone (success and failure)
    - Loopback transport failure → 500 {test_result: "failed", error}
"""

import httpx
from httpx import ASGITransport

from table_agent.services.self_test import SelfTester


async def _standalone(client):
    res = await client.post("/create-table")
    return res.status_code, res.json()


async def test_self_test_success_relays_creation_body(client, airtable):
    _, expected = await _standalone(client)
    res = await client.post("/test")
    assert res.status_code == 200
    body = res.json()
    assert body["test_result"] == "success"
    assert body["message"] == "Test completed - table creation attempted"
    assert body["result"] == expected


async def test_self_test_failure_relays_creation_body(client, airtable):
    airtable.respond(422, {"error": "INVALID_REQUEST"})
    _, expected = await _standalone(client)
    res = await client.post("/test")
    assert res.status_code == 500
    body = res.json()
    assert body["test_result"] == "failed"
    assert body["error"] == "Request failed with status code 422"
    assert body["result"] == expected


async def test_self_test_logs_intent(client, airtable, activity_log):
    await client.post("/test")
    messages = [e.split(": ", 1)[1] for e in activity_log.recent(100)]
    assert messages[0] == "Test run - creating team task list table..."
    assert "Starting team task list table creation..." in messages


async def test_loopback_mode_calls_own_route(app, client, airtable, activity_log, creator):
    app.state.self_tester = SelfTester(
        activity_log, creator, mode="loopback",
        loopback_url="http://loopback", transport=ASGITransport(app=app),
    )
    _, expected = await _standalone(client)
    res = await client.post("/test")
    assert res.status_code == 200
    assert res.json()["result"] == expected
    assert len(airtable.requests) == 2


async def test_loopback_mode_relays_creation_failure(app, client, airtable, activity_log, creator):
    app.state.self_tester = SelfTester(
        activity_log, creator, mode="loopback",
        loopback_url="http://loopback", transport=ASGITransport(app=app),
    )
    airtable.respond(422, {"error": "INVALID_REQUEST"})
    res = await client.post("/test")
    assert res.status_code == 500
    body = res.json()
    assert body["test_result"] == "failed"
    assert body["result"]["details"] == {"error": "INVALID_REQUEST"}


async def test_loopback_unreachable_returns_failed(app, client, activity_log, creator):
    def refuse(request):
        raise httpx.ConnectError("connection refused")

    app.state.self_tester = SelfTester(
        activity_log, creator, mode="loopback",
        loopback_url="http://loopback", transport=httpx.MockTransport(refuse),
    )
    res = await client.post("/test")
    assert res.status_code == 500
    assert res.json() == {"test_result": "failed", "error": "connection refused"}
    assert activity_log.recent(1)[0].endswith("Test failed: connection refused")


async def test_loopback_non_object_body_returns_failed(activity_log, creator):
    tester = SelfTester(
        activity_log, creator, mode="loopback", loopback_url="http://loopback",
        transport=httpx.MockTransport(lambda r: httpx.Response(500, json=["oops"])),
    )
    outcome = await tester.run()
    assert outcome.status_code == 500
    assert outcome.body["test_result"] == "failed"
    assert "unexpected body" in outcome.body["error"]
    assert "result" not in outcome.body
