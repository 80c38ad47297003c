"""Rate limiting for calls to the IKB API."""

from __future__ import annotations

import threading
import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .logging import logger


@runtime_checkable
class RateLimiter(Protocol):
    def check_limit(self) -> bool:
        """Return True if a call is allowed, recording it when it is."""
        ...


@dataclass
class RateLimitDecision:
    allowed: bool
    reason: str | None = None
    retry_after: float | None = None


class SlidingWindowRateLimiter:
    """In-memory limiter allowing ``max_requests`` per ``window_seconds``.

    Timestamps come from a monotonic clock. The check and the record happen
    under one lock so concurrent callers can never exceed the cap.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.max_requests = max_requests
        self.window = window_seconds
        self._clock = clock
        self._requests: deque[float] = deque()
        self._lock = threading.Lock()

    def _prune(self, current: float) -> None:
        cutoff = current - self.window
        while self._requests and self._requests[0] <= cutoff:
            self._requests.popleft()

    def acquire(self) -> RateLimitDecision:
        """Check the window and record the call if allowed."""
        with self._lock:
            current = self._clock()
            self._prune(current)
            if len(self._requests) >= self.max_requests:
                retry_after = self._requests[0] + self.window - current
                return RateLimitDecision(False, reason="quota", retry_after=max(retry_after, 0.0))
            self._requests.append(current)
            return RateLimitDecision(True)

    def check_limit(self) -> bool:
        decision = self.acquire()
        if not decision.allowed:
            logger.warning(
                "ikb_rate_limited",
                max_requests=self.max_requests,
                window_seconds=self.window,
                retry_after_seconds=round(decision.retry_after or 0.0, 3),
            )
        return decision.allowed

    @property
    def remaining(self) -> int:
        with self._lock:
            self._prune(self._clock())
            return self.max_requests - len(self._requests)
