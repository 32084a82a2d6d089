"""Error Hierarchy - typed, categorized exceptions for every table-creation failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - NetworkError: the Airtable call never completed (DNS, refused, timeout)
    - GatewayError: Airtable answered with a non-2xx status; carries status + body
    - LocalError: fault inside this process (serialization, undecodable body)
    - to_response() produces the REST envelope used by the global handlers
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    EXTERNAL_API = "external_api"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    base_id: str | None = None


class TableAgentError(Exception):
    """Base exception for all table agent errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def detail(self) -> Any:
        """Structured payload worth surfacing to callers, if any."""
        return None

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "base_id": self.context.base_id,
                },
            }
        }


# ─── Infrastructure Errors ──────────────────────────────────────

class NetworkError(TableAgentError):
    """Airtable could not be reached."""
    def __init__(
        self, message: str, timed_out: bool = False,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message,
            "NETWORK_TIMEOUT" if timed_out else "NETWORK_ERROR",
            ErrorCategory.TIMEOUT if timed_out else ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.timed_out = timed_out


class GatewayError(TableAgentError):
    """Airtable responded with a failure status."""
    def __init__(
        self, status_code: int, detail: Any = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Request failed with status code {status_code}",
            "AIRTABLE_API_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
        self.status_code = status_code
        self._detail = detail

    @property
    def detail(self) -> Any:
        return self._detail


class LocalError(TableAgentError):
    """Unexpected fault inside this process."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "LOCAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
