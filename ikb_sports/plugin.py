"""IKB sports search plugin.

Exposes a single ``IKB_SEARCH`` action to the host agent runtime. One call
runs the pipeline: rate-limit check, query validation and interpretation,
fetch from the IKB API, record to the memory store, render the first game.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from .client import IKBClient
from .config import IKBPluginConfig, Settings, get_settings
from .errors import handle_api_error
from .exceptions import ConfigurationError, IKBError, RateLimitExceeded
from .formatting import format_search_results, render_first
from .logging import logger
from .memory import MemoryRecorder, MemoryStore
from .models import ActionResult, SearchQuery, SearchResult
from .query import interpret_query, validate_search_query
from .rate_limit import RateLimiter, SlidingWindowRateLimiter

SEARCH_ACTION_NAME = "IKB_SEARCH"


@dataclass(frozen=True)
class ActionExample:
    user: str
    text: str


@dataclass
class SearchAction:
    """An action the host runtime can dispatch messages to."""

    name: str
    description: str
    validate: Callable[[str], Awaitable[bool]]
    handler: Callable[[str], Awaitable[ActionResult]]
    examples: list[list[ActionExample]] = field(default_factory=list)
    similes: list[str] = field(default_factory=list)


def validate_api_key(config: IKBPluginConfig) -> None:
    if not config.api_key:
        raise ConfigurationError("IKB API key is required")


class IKBSearchPlugin:
    name = "ikb-sports"
    description = "Search NBA and NFL statistics using IKB API"

    def __init__(
        self,
        config: IKBPluginConfig | dict[str, Any],
        memory_store: MemoryStore,
        rate_limiter: RateLimiter | None = None,
        client: IKBClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        if not isinstance(config, IKBPluginConfig):
            config = IKBPluginConfig.model_validate(config)
        validate_api_key(config)
        self.config = config

        settings = settings or get_settings()
        client_config = settings.client_config
        self.rate_limiter = rate_limiter or SlidingWindowRateLimiter(
            max_requests=client_config.rate_limit_max_requests,
            window_seconds=client_config.rate_limit_window_seconds,
        )
        self.client = client or IKBClient(
            api_key=config.api_key,
            base_url=settings.ikb_base_url,
            timeout=client_config.request_timeout_seconds,
        )
        self.recorder = MemoryRecorder(memory_store)
        self.actions: list[SearchAction] = [self._build_search_action()]

    @classmethod
    def from_settings(
        cls,
        memory_store: MemoryStore,
        settings: Settings | None = None,
        **overrides: Any,
    ) -> IKBSearchPlugin:
        """Build a plugin whose API key comes from IKB_API_KEY."""
        settings = settings or get_settings()
        config = IKBPluginConfig.from_settings(settings, **overrides)
        return cls(config, memory_store, settings=settings)

    def _build_search_action(self) -> SearchAction:
        return SearchAction(
            name=SEARCH_ACTION_NAME,
            description="Search NBA and NFL game statistics and player data",
            validate=self.validate,
            handler=self.search,
            examples=[
                [ActionExample(user="user", text="Get NBA games for 2024-12-15")],
                [ActionExample(user="user", text="Show me NFL stats from 2024-12-22")],
            ],
            similes=["ikb", "nba stats", "nfl stats", "sports data"],
        )

    def get_action(self, name: str) -> SearchAction | None:
        return next((action for action in self.actions if action.name == name), None)

    async def validate(self, text: str) -> bool:
        try:
            validate_search_query(text)
        except IKBError:
            return False
        return True

    def interpret(self, text: str) -> SearchQuery:
        filters = self.config.filters
        return interpret_query(text, default_sport=filters.sport, default_date=filters.date)

    async def search(self, text: str) -> ActionResult:
        """Handle one IKB_SEARCH message; never raises."""
        try:
            return await self._search(text)
        except Exception as exc:
            return handle_api_error(exc)

    async def _search(self, text: str) -> ActionResult:
        if not self.rate_limiter.check_limit():
            raise RateLimitExceeded()

        query = self.interpret(validate_search_query(text))
        logger.info("ikb_search", sport=query.sport, date=query.date, view=self.config.search_type)

        payload = await self.client.fetch_games(query.sport, query.date)
        await self.recorder.record(query.sport, query.date, payload.data)

        result = SearchResult(
            title=f"{query.sport.upper()} Stats for {query.date}",
            url=self.client.build_url(query.sport, query.date),
            snippet=render_first(payload.data, self.config.search_type),
            score=1.0,
            source="ikb",
            metadata={
                "sport": query.sport,
                "date": query.date,
                "dataType": self.config.search_type,
            },
        )
        return ActionResult(success=True, response=format_search_results([result]))

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> IKBSearchPlugin:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
