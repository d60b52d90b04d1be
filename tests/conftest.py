"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from slippi_ranks.ratelimit import set_rate_limiter

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all SLIPPI_RANKS__ env vars so tests are isolated from the shell."""
    for key in list(os.environ):
        if key.startswith("SLIPPI_RANKS__"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def reset_rate_limiter() -> Generator[None]:
    """Reset the process-wide limiter before and after each test."""
    set_rate_limiter(None)
    yield
    set_rate_limiter(None)
