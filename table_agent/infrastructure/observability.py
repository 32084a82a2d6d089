"""Structured Logging - JSON formatter and setup for production observability.

Invariants:
    - All application logs include timestamp, level, logger name, and message
    - Extra fields (error_code, status_code, path, base_id) surfaced when present
    - Activity entries go to stdout verbatim, one line each, not through the root handler
    - setup_logging is idempotent: repeated calls do not stack handlers
"""

import json
import logging
import sys
from datetime import datetime, timezone

from table_agent.core.activity_log import ACTIVITY_LOGGER_NAME

_EXTRA_KEYS = ("error_code", "status_code", "path", "base_id", "table_id")
_HANDLER_MARK = "_table_agent_handler"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    _drop_own_handlers(logging.root)
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    setattr(handler, _HANDLER_MARK, True)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    setup_activity_console()


def setup_activity_console() -> logging.Logger:
    """Mirror activity entries to stdout exactly as stored."""
    activity = logging.getLogger(ACTIVITY_LOGGER_NAME)
    _drop_own_handlers(activity)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, _HANDLER_MARK, True)
    activity.addHandler(handler)
    activity.setLevel(logging.INFO)
    activity.propagate = False
    return activity


def _drop_own_handlers(target: logging.Logger) -> None:
    for h in list(target.handlers):
        if getattr(h, _HANDLER_MARK, False):
            target.removeHandler(h)
