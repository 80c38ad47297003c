"""IKB sports search plugin: NBA/NFL stats for conversational agents."""

from .client import IKBClient
from .config import IKBPluginConfig, SearchFilters, Settings, get_settings
from .exceptions import (
    ConfigurationError,
    IKBError,
    MemoryStoreError,
    NetworkError,
    RateLimitExceeded,
    ResponseParseError,
    UpstreamApiError,
    ValidationError,
)
from .memory import InMemoryMemoryStore, MemoryRecorder, MemoryStore
from .models import ActionResult, GameRecord, SearchQuery, SearchResult
from .plugin import SEARCH_ACTION_NAME, IKBSearchPlugin, SearchAction
from .rate_limit import RateLimiter, SlidingWindowRateLimiter

__all__ = [
    "ActionResult",
    "ConfigurationError",
    "GameRecord",
    "IKBClient",
    "IKBError",
    "IKBPluginConfig",
    "IKBSearchPlugin",
    "InMemoryMemoryStore",
    "MemoryRecorder",
    "MemoryStore",
    "MemoryStoreError",
    "NetworkError",
    "RateLimitExceeded",
    "RateLimiter",
    "ResponseParseError",
    "SEARCH_ACTION_NAME",
    "SearchAction",
    "SearchFilters",
    "SearchQuery",
    "SearchResult",
    "Settings",
    "SlidingWindowRateLimiter",
    "UpstreamApiError",
    "ValidationError",
    "get_settings",
]
