"""
Typed settings for the IKB sports search plugin.

Uses Pydantic Settings to load service configuration from environment
variables, and a plain Pydantic model for the per-plugin options the host
runtime passes in at startup.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import Sport
from .validate_env import validate_env

VIEW_MODES: tuple[str, ...] = ("game", "teams", "players")

DEFAULT_BASE_URL = "https://api.ikb.gg/ai"


class IKBClientConfig(BaseModel):
    request_timeout_seconds: float = 15.0
    # Fixed cap on upstream calls per plugin instance
    rate_limit_max_requests: int = Field(default=60)
    rate_limit_window_seconds: float = Field(default=60.0)


class Settings(BaseSettings):
    """
    Service settings loaded from environment variables.

    For local development, values are also read from the project root .env
    file if it exists.
    """
    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="allow",
    )

    ikb_api_key: str | None = Field(None, alias="IKB_API_KEY")
    ikb_base_url: str = Field(DEFAULT_BASE_URL, alias="IKB_BASE_URL")
    environment: str = Field("development", alias="ENVIRONMENT")
    log_level: str | None = Field(None, alias="LOG_LEVEL")
    client_config: IKBClientConfig = Field(default_factory=IKBClientConfig)

    @field_validator("ikb_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class SearchFilters(BaseModel):
    """Default filter values, overridable per query via text."""

    sport: Sport = "nba"
    date: str | None = None  # YYYY-MM-DD; None means the current UTC date


class IKBPluginConfig(BaseModel):
    """Options recognized by IKBSearchPlugin.

    ``search_type`` is kept as a plain string so an unrecognized view mode
    still loads and renders with the game view.
    """

    api_key: str = ""
    search_type: str = "game"
    # Not enforced on output length
    max_results: int = 5
    filters: SearchFilters = Field(default_factory=SearchFilters)

    @field_validator("api_key", mode="before")
    @classmethod
    def strip_api_key(cls, v: str | None) -> str:
        return (v or "").strip()

    @classmethod
    def from_settings(cls, settings: Settings, **overrides) -> IKBPluginConfig:
        return cls(api_key=settings.ikb_api_key or "", **overrides)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return cached settings instance.

    Settings are cached to avoid re-parsing environment variables
    on every access.
    """
    validate_env()
    return Settings()


settings = get_settings()
