"""Root conftest - shared test configuration."""

import os

import pytest

# Ensure tests don't accidentally use a real Airtable token
os.environ.setdefault("AIRTABLE_PAT", "pat-test-fake-token")

from table_agent.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
