"""Error Hierarchy - codes, statuses and detail payloads."""

from table_agent.core.errors import (
    ErrorCategory, ErrorContext, GatewayError, LocalError, NetworkError,
    TableAgentError,
)


def test_gateway_error_carries_status_and_detail():
    err = GatewayError(422, {"error": "INVALID_REQUEST"})
    assert isinstance(err, TableAgentError)
    assert err.status_code == 422
    assert err.detail == {"error": "INVALID_REQUEST"}
    assert err.message == "Request failed with status code 422"
    assert err.category == ErrorCategory.EXTERNAL_API


def test_network_error_timeout_variant():
    err = NetworkError("slow", timed_out=True)
    assert err.code == "NETWORK_TIMEOUT"
    assert err.category == ErrorCategory.TIMEOUT
    assert err.detail is None
    assert NetworkError("refused").code == "NETWORK_ERROR"


def test_local_error_is_internal():
    err = LocalError("boom")
    assert err.http_status == 500
    assert err.category == ErrorCategory.INTERNAL


def test_to_response_shape():
    err = GatewayError(
        401, None, context=ErrorContext(operation="create_table", base_id="appX"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "AIRTABLE_API_ERROR"
    assert body["context"] == {"operation": "create_table", "base_id": "appX"}
    assert body["severity"] == "error"


def test_error_context_carries_operation_and_base_only():
    ctx = ErrorContext(operation="create_table", base_id="appX")
    assert set(vars(ctx)) == {"timestamp", "operation", "base_id"}
