"""Route dependencies - hand the lifespan-built components to handlers.

The lifespan in main.py constructs each component once and stores it on
app.state; routes receive them through Depends, so tests can override them.
"""

from fastapi import Request

from table_agent.config import Settings, get_settings
from table_agent.core.activity_log import ActivityLog
from table_agent.services.self_test import SelfTester
from table_agent.services.table_creation import TableCreator


def get_activity_log(request: Request) -> ActivityLog:
    return request.app.state.activity_log


def get_table_creator(request: Request) -> TableCreator:
    return request.app.state.table_creator


def get_self_tester(request: Request) -> SelfTester:
    return request.app.state.self_tester


def get_app_settings() -> Settings:
    return get_settings()
