"""Table Creation - builds the team task schema, sends it to Airtable, records the outcome.

Invariants:
    - Never raises: every failure becomes a 500 failure envelope
    - Success envelope: success, message, table{id, name, fields(count), base_id}, details
    - Failure envelope: success=False, error, details (Airtable body or a placeholder)
    - Each step is recorded in the activity log
"""

import json
import logging
from dataclasses import dataclass

from fastapi import status

from table_agent.core.activity_log import ActivityLog
from table_agent.core.errors import TableAgentError
from table_agent.core.team_task_schema import build_team_task_schema
from table_agent.infrastructure.airtable_client import AirtableClient

logger = logging.getLogger(__name__)

NO_DETAILS = "No additional details available"


@dataclass(frozen=True)
class CreationOutcome:
    """HTTP-ready result of one creation attempt."""
    status_code: int
    body: dict

    @property
    def succeeded(self) -> bool:
        return self.status_code < 400


class TableCreator:
    """Runs the create-table use-case against one Airtable base."""

    def __init__(self, activity_log: ActivityLog, client: AirtableClient):
        self.activity_log = activity_log
        self.client = client

    async def create(self) -> CreationOutcome:
        log = self.activity_log.log
        try:
            log("Starting team task list table creation...")
            schema = build_team_task_schema()
            log(f"Sending request to create table: {schema.name}")
            data = await self.client.create_table(schema)
            return self._success(data)
        except TableAgentError as e:
            return self._failure(e.message, e.detail)
        except Exception as e:
            logger.error(f"Unexpected error creating table: {e}", exc_info=True)
            return self._failure(str(e) or type(e).__name__, None)

    def _success(self, data: dict) -> CreationOutcome:
        table_id = data.get("id")
        self.activity_log.log(f"Table created successfully! Table ID: {table_id}")
        return CreationOutcome(
            status.HTTP_200_OK,
            {
                "success": True,
                "message": "Team Task List table created successfully!",
                "table": {
                    "id": table_id,
                    "name": data.get("name"),
                    "fields": len(data.get("fields") or []),
                    "base_id": self.client.base_id,
                },
                "details": data,
            },
        )

    def _failure(self, message: str, detail) -> CreationOutcome:
        self.activity_log.log(f"Error creating table: {message}")
        if detail is not None:
            self.activity_log.log(f"API Error Details: {_dump(detail)}")
        return CreationOutcome(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            {
                "success": False,
                "error": message,
                "details": detail if detail is not None else NO_DETAILS,
            },
        )


def _dump(detail) -> str:
    try:
        return json.dumps(detail, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(detail)
