"""Error types raised by the IKB search pipeline.

Every error carries a user-facing message; the action boundary turns any
of them into a failed ActionResult.
"""

from __future__ import annotations

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."


class IKBError(Exception):
    """Base class for IKB plugin errors."""


class ConfigurationError(IKBError):
    """Plugin options are missing or invalid."""


class ValidationError(IKBError):
    """The search query is empty or malformed."""


class RateLimitExceeded(IKBError):
    """The per-plugin request cap has been reached."""

    def __init__(self, message: str = RATE_LIMIT_MESSAGE) -> None:
        super().__init__(message)


class UpstreamApiError(IKBError):
    """The IKB API answered with a non-2xx status."""

    def __init__(self, status_text: str, status_code: int | None = None) -> None:
        super().__init__(f"IKB API error: {status_text}")
        self.status_text = status_text
        self.status_code = status_code


class ResponseParseError(UpstreamApiError):
    """The IKB API answered 2xx but the body could not be parsed."""


class NetworkError(IKBError):
    """The request never produced an HTTP response."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"IKB API request failed: {reason}")
        self.reason = reason


class MemoryStoreError(IKBError):
    """The memory store rejected or failed to persist a record."""
