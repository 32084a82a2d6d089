"""Airtable Client - wraps httpx.AsyncClient for the metadata API's create-table call.

Invariants:
    - Every request carries the same base id and bearer credential, fixed at construction
    - 2xx → decoded JSON body, untouched
    - Non-2xx → GatewayError(status_code, body); body decoded as JSON when possible
    - Transport failures (DNS, refused, timeout) → NetworkError
    - Serialization / undecodable success body → LocalError
    - Bounded timeout, no retries
"""

import json
import logging

import httpx

from table_agent.core.errors import (
    ErrorContext, GatewayError, LocalError, NetworkError,
)
from table_agent.schemas.table import TableSchema

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.airtable.com"


class AirtableClient:
    """Async gateway to the Airtable metadata API for a single base."""

    def __init__(
        self,
        base_id: str,
        token: str,
        api_url: str = DEFAULT_API_URL,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_id = base_id
        if not token:
            # Sent anyway; Airtable's 401 is surfaced as a GatewayError.
            logger.warning(
                "AIRTABLE_PAT is not set; requests will be unauthenticated",
                extra={"base_id": base_id},
            )
        self.client = httpx.AsyncClient(
            base_url=api_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
            },
            timeout=timeout_seconds,
            transport=transport,
        )

    @property
    def tables_path(self) -> str:
        return f"/v0/meta/bases/{self.base_id}/tables"

    async def create_table(self, schema: TableSchema) -> dict:
        """Create a table in the base. Returns Airtable's response body."""
        context = ErrorContext(operation="create_table", base_id=self.base_id)
        try:
            body = json.dumps(schema.to_payload())
        except (TypeError, ValueError) as e:
            raise LocalError(f"Could not serialize table schema: {e}", context)

        try:
            response = await self.client.post(self.tables_path, content=body)
        except httpx.TimeoutException as e:
            raise NetworkError(
                f"Timed out calling Airtable: {e}", timed_out=True, context=context,
            )
        except httpx.RequestError as e:
            raise NetworkError(f"Could not reach Airtable: {e}", context=context)

        if not response.is_success:
            logger.warning(
                "Airtable rejected create_table",
                extra={"status_code": response.status_code, "base_id": self.base_id},
            )
            raise GatewayError(
                response.status_code, _decode_body(response), context=context,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise LocalError(f"Airtable returned a non-JSON body: {e}", context)
        if not isinstance(data, dict):
            raise LocalError("Airtable returned an unexpected body shape", context)
        logger.info(
            "Airtable table created",
            extra={"table_id": data.get("id"), "base_id": self.base_id},
        )
        return data

    async def aclose(self) -> None:
        await self.client.aclose()


def _decode_body(response: httpx.Response):
    """JSON body if decodable, raw text otherwise, None when empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
