"""Process-wide throttle for outbound Slippi requests.

Every lookup in the process draws from one ``AsyncLimiter``. It holds a
single request of budget and refills continuously, so concurrent lookups
are spaced ``1 / requests_per_second`` apart.
"""

from __future__ import annotations

from aiolimiter import AsyncLimiter

from slippi_ranks.config import load_settings


def build_rate_limiter(requests_per_second: float) -> AsyncLimiter:
    """Limiter allowing one request at a time, refilled at *requests_per_second*."""
    if requests_per_second <= 0:
        raise ValueError(f"requests_per_second must be positive, got {requests_per_second}")
    return AsyncLimiter(1, 1.0 / requests_per_second)


_limiter: AsyncLimiter | None = None


def get_rate_limiter() -> AsyncLimiter:
    """Get the process-wide limiter, creating it from settings on first use."""
    global _limiter
    if _limiter is None:
        _limiter = build_rate_limiter(load_settings().requests_per_second)
    return _limiter


def set_rate_limiter(limiter: AsyncLimiter | None) -> None:
    """Set or reset the process-wide limiter.

    Pass None to reset, which will cause get_rate_limiter() to create
    a new one from settings.
    """
    global _limiter
    _limiter = limiter
