"""
Tests for the fixed-window rate limiter.
"""

from fipe_proxy.middleware import FixedWindowRateLimiter


def test_budget_per_client(clock):
    """Each client has its own budget within a window."""
    limiter = FixedWindowRateLimiter(max_requests=2, window_seconds=60, clock=clock)

    assert limiter.hit("10.0.0.1").allowed
    assert limiter.hit("10.0.0.1").remaining == 0
    assert not limiter.hit("10.0.0.1").allowed
    assert limiter.hit("10.0.0.2").allowed


def test_window_resets(clock):
    """A blocked client passes again once its window has elapsed."""
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60, clock=clock)
    limiter.hit("10.0.0.1")
    assert not limiter.hit("10.0.0.1").allowed

    clock.advance(60)
    result = limiter.hit("10.0.0.1")
    assert result.allowed
    assert result.reset_after == 60


def test_expired_clients_are_dropped(clock):
    """Idle clients do not stay in memory after their window expires."""
    limiter = FixedWindowRateLimiter(max_requests=10, window_seconds=900, clock=clock)
    for i in range(500):
        limiter.hit(f"10.0.{i // 256}.{i % 256}")
    assert len(limiter) == 500

    clock.advance(10_000)
    limiter.hit("192.168.0.1")
    assert len(limiter) == 1


def test_active_clients_survive_sweep(clock):
    """Only windows that have expired are dropped."""
    limiter = FixedWindowRateLimiter(max_requests=10, window_seconds=100, clock=clock)
    limiter.hit("old")
    clock.advance(60)
    limiter.hit("recent")
    clock.advance(50)

    limiter.hit("new")
    assert len(limiter) == 2
    assert limiter.hit("recent").remaining == 8
