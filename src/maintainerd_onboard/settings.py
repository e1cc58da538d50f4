"""
maintainerd_onboard.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the store, the Service client,
  and the reconciliation engine.
- Hide secrets from repr/logging (e.g., the FOSSA API token).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MAINTAINERD_", case_sensitive=False, populate_by_name=True
    )

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "maintainerd-onboard"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./maintainers.db"

    # Service being onboarded to; resolved to a Service row at the start of a pass.
    target_service: str = "fossa"

    # FOSSA
    fossa_api_base_url: str = "https://app.fossa.com/api"
    fossa_app_url: str = "https://app.fossa.com"
    fossa_api_token: str = Field(
        default="",
        repr=False,
        validation_alias=AliasChoices("FOSSA_API_TOKEN", "MAINTAINERD_FOSSA_API_TOKEN"),
    )
    http_timeout_seconds: float = 30.0

    # Reconciler
    invitation_concurrency: int = Field(default=4, ge=1)
    invitation_window_hours: int = 48
    max_listed_repos: int = Field(default=10, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# FOSSA_API_TOKEN is accepted without the prefix because operators already export it
# for other maintainerd tooling.
