"""Conversion of pipeline errors into action results."""

from __future__ import annotations

from .exceptions import IKBError, RateLimitExceeded, ValidationError
from .logging import logger
from .models import ActionResult

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred while searching IKB."


def handle_api_error(exc: BaseException) -> ActionResult:
    """Map any exception to ``ActionResult(success=False)``."""
    if isinstance(exc, IKBError):
        # Rejections are routine; everything else is a failed search
        if isinstance(exc, (RateLimitExceeded, ValidationError)):
            logger.info("ikb_search_rejected", error_type=type(exc).__name__, error=str(exc))
        else:
            logger.warning("ikb_search_failed", error_type=type(exc).__name__, error=str(exc))
        return ActionResult(success=False, response=str(exc))

    logger.exception("ikb_search_unexpected_error", error_type=type(exc).__name__)
    return ActionResult(success=False, response=UNEXPECTED_ERROR_MESSAGE)
