"""Tests for the IKB request rate limiter."""

from __future__ import annotations

import threading

import pytest

from ikb_sports.rate_limit import RateLimitDecision, RateLimiter, SlidingWindowRateLimiter


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class TestRateLimitDecision:
    def test_create_allowed_decision(self):
        decision = RateLimitDecision(allowed=True)
        assert decision.allowed is True
        assert decision.reason is None
        assert decision.retry_after is None


class TestSlidingWindowRateLimiter:
    def test_satisfies_protocol(self):
        assert isinstance(SlidingWindowRateLimiter(1, 1), RateLimiter)

    @pytest.mark.parametrize(("max_requests", "window"), [(0, 60), (10, 0), (10, -1)])
    def test_invalid_arguments(self, max_requests, window):
        with pytest.raises(ValueError):
            SlidingWindowRateLimiter(max_requests, window)

    def test_allows_up_to_max_then_denies(self):
        limiter = SlidingWindowRateLimiter(max_requests=3, window_seconds=60, clock=FakeClock())
        assert [limiter.check_limit() for _ in range(4)] == [True, True, True, False]

    def test_denied_call_is_not_recorded(self):
        clock = FakeClock()
        limiter = SlidingWindowRateLimiter(max_requests=1, window_seconds=60, clock=clock)
        assert limiter.check_limit() is True
        clock.advance(30)
        assert limiter.check_limit() is False
        clock.advance(30)
        # Only the first call occupied the window
        assert limiter.check_limit() is True

    def test_window_expiry_frees_slots(self):
        clock = FakeClock()
        limiter = SlidingWindowRateLimiter(max_requests=2, window_seconds=60, clock=clock)
        limiter.check_limit()
        limiter.check_limit()
        assert limiter.remaining == 0
        clock.advance(60)
        assert limiter.remaining == 2
        assert limiter.check_limit() is True

    def test_retry_after_reported(self):
        clock = FakeClock()
        limiter = SlidingWindowRateLimiter(max_requests=1, window_seconds=60, clock=clock)
        limiter.acquire()
        clock.advance(15)
        decision = limiter.acquire()
        assert decision.allowed is False
        assert decision.reason == "quota"
        assert decision.retry_after == pytest.approx(45)

    def test_concurrent_callers_never_exceed_cap(self):
        limiter = SlidingWindowRateLimiter(max_requests=50, window_seconds=3600)
        results: list[bool] = []
        lock = threading.Lock()

        def worker():
            for _ in range(20):
                allowed = limiter.check_limit()
                with lock:
                    results.append(allowed)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 160
        assert results.count(True) == 50
