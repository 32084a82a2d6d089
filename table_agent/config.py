"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - The Airtable credential comes from the environment (AIRTABLE_PAT), never hardcoded
    - The target base id is a compiled-in constant, not configurable
    - get_settings() is cached (lru_cache) - single instance per process
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

AIRTABLE_BASE_ID = "appEZQLiRm9cfnVkP"  # Growth AI base


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Airtable
    airtable_pat: str = ""
    airtable_api_url: str = "https://api.airtable.com"
    airtable_timeout_seconds: float = 30.0

    # POST /test: call the creation use-case directly or over HTTP
    self_test_mode: Literal["in_process", "loopback"] = "loopback"

    # Activity log ring buffer
    activity_log_capacity: int = 100

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def base_id(self) -> str:
        return AIRTABLE_BASE_ID


@lru_cache
def get_settings() -> Settings:
    return Settings()
