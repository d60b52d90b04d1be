from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from types import TracebackType
from typing import Any

import httpx
from aiolimiter import AsyncLimiter

from slippi_ranks.config import DEFAULT_ENDPOINT, RankSettings
from slippi_ranks.domain.rank import PlayerCode, RankRecord
from slippi_ranks.domain.tier import tier_for_rating
from slippi_ranks.exceptions import RemoteLookupError
from slippi_ranks.ratelimit import get_rate_limiter
from slippi_ranks.slippi.query import build_profile_request

logger = logging.getLogger(__name__)

# Account whose ranked character data is unreliable; always shown as its own label.
_CHARACTER_OVERRIDES: dict[str, str] = {"FUDG#228": "FUDGE"}


def select_main_character(code: PlayerCode, characters: Sequence[Mapping[str, Any]]) -> str:
    """Return the most played character, or "" when none are recorded.

    The first character with the highest game count wins ties.
    """
    override = _CHARACTER_OVERRIDES.get(code)
    if override is not None:
        return override
    if not characters:
        return ""
    most_played = max(characters, key=lambda c: c.get("gameCount") or 0)
    return str(most_played.get("character") or "")


def _is_character_entry(entry: object) -> bool:
    if not isinstance(entry, Mapping):
        return False
    games = entry.get("gameCount")
    return games is None or (isinstance(games, int) and not isinstance(games, bool))


def _count(code: PlayerCode, profile: Mapping[str, Any], field: str) -> int:
    value = profile.get(field)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise RemoteLookupError(code, f"invalid {field} value {value!r}")
    return value


def _rating(code: PlayerCode, profile: Mapping[str, Any]) -> float:
    value = profile.get("ratingOrdinal")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RemoteLookupError(code, f"missing or non-numeric rating {value!r}")
    if not math.isfinite(value):
        raise RemoteLookupError(code, f"non-finite rating {value!r}")
    return float(value)


def _find_user(code: PlayerCode, payload: Mapping[str, Any]) -> Mapping[str, Any]:
    data = payload.get("data")
    if not isinstance(data, Mapping):
        errors = payload.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], Mapping):
            raise RemoteLookupError(code, f"GraphQL error: {errors[0].get('message', 'unknown error')}")
        raise RemoteLookupError(code, "response has no data")
    connect_code = data.get("getConnectCode")
    if not isinstance(connect_code, Mapping):
        raise RemoteLookupError(code, "connect code not found")
    user = connect_code.get("user")
    if not isinstance(user, Mapping):
        raise RemoteLookupError(code, "user not found")
    return user


def parse_rank_record(code: PlayerCode, payload: Mapping[str, Any]) -> RankRecord:
    """Normalize a raw profile response into a RankRecord.

    Raises:
        RemoteLookupError: If the player is missing or the response is not in the expected shape.
    """
    user = _find_user(code, payload)
    profile = user.get("rankedNetplayProfile")
    if not isinstance(profile, Mapping):
        raise RemoteLookupError(code, "user has no ranked profile")
    tag = user.get("displayName")
    if not isinstance(tag, str):
        raise RemoteLookupError(code, "user has no display name")

    characters = profile.get("characters") or []
    if not isinstance(characters, list) or not all(_is_character_entry(c) for c in characters):
        raise RemoteLookupError(code, "malformed character list")

    rating = _rating(code, profile)
    return RankRecord(
        tag=tag,
        code=code,
        tier=tier_for_rating(rating),
        rating=rating,
        wins=_count(code, profile, "wins"),
        losses=_count(code, profile, "losses"),
        main_character=select_main_character(code, characters),
    )


class SlippiClient:
    """Async client for the Slippi GraphQL gateway.

    Every request first takes one unit from *limiter*, which defaults to the
    process-wide limiter shared by all clients.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        client: httpx.AsyncClient | None = None,
        limiter: AsyncLimiter | None = None,
        timeout: httpx.Timeout | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout or httpx.Timeout(10.0, connect=5.0))
        self._limiter = limiter or get_rate_limiter()

    @classmethod
    def from_settings(cls, settings: RankSettings) -> SlippiClient:
        return cls(
            endpoint=settings.endpoint,
            timeout=httpx.Timeout(settings.timeout, connect=settings.connect_timeout),
        )

    @property
    def limiter(self) -> AsyncLimiter:
        return self._limiter

    async def __aenter__(self) -> SlippiClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch_profile(self, code: PlayerCode) -> dict[str, Any]:
        """Fetch the raw profile payload for *code*."""
        if not self._limiter.has_capacity():
            logger.debug("Request budget exhausted, %s waits for the next slot", code)
        await self._limiter.acquire()
        logger.debug("POST %s cc=%s", self._endpoint, code)
        try:
            response = await self._client.post(self._endpoint, json=build_profile_request(code))
            logger.debug("Slippi responded %d for %s", response.status_code, code)
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as e:
            raise RemoteLookupError(code, "request timed out") from e
        except httpx.HTTPStatusError as e:
            raise RemoteLookupError(code, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise RemoteLookupError(code, f"request failed: {e}") from e
        except ValueError as e:
            raise RemoteLookupError(code, f"invalid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise RemoteLookupError(code, "response is not a JSON object")
        return payload

    async def fetch_rank(self, code: PlayerCode) -> RankRecord:
        payload = await self.fetch_profile(code)
        return parse_rank_record(code, payload)
