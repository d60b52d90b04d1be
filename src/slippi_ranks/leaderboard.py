"""Concurrent leaderboard assembly.

Fetches every requested connect code at once through a shared
SlippiClient, drops players without enough ranked games and orders the
rest by rating.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Sequence

from slippi_ranks.config import load_settings
from slippi_ranks.domain.rank import PlayerCode, RankRecord
from slippi_ranks.slippi.client import SlippiClient

logger = logging.getLogger(__name__)

MIN_GAMES = 5


def is_eligible(record: RankRecord, min_games: int = MIN_GAMES) -> bool:
    return record.games >= min_games


def sort_by_rating(records: Iterable[RankRecord]) -> list[RankRecord]:
    """Highest rating first; equal ratings keep their input order."""
    return sorted(records, key=lambda r: r.rating, reverse=True)


async def _fetch_all(client: SlippiClient, codes: Sequence[PlayerCode]) -> list[RankRecord]:
    tasks = [asyncio.ensure_future(client.fetch_rank(code)) for code in codes]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        # First failure fails the batch; stop the lookups still in flight.
        for task in tasks:
            task.cancel()
        raise


async def get_ranks(
    codes: Sequence[PlayerCode],
    *,
    client: SlippiClient | None = None,
    min_games: int | None = None,
) -> list[RankRecord]:
    """Build the ranked leaderboard for *codes*.

    Args:
        codes: Connect codes to look up. Duplicates are looked up independently.
        client: Client to fetch with. When omitted, one is built from settings
            and closed before returning.
        min_games: Minimum wins + losses for inclusion. Defaults to the
            configured ``leaderboard.min_games``.

    Returns:
        Eligible players, highest rating first.

    Raises:
        RemoteLookupError: If any single lookup fails. No partial result is returned.
    """
    if client is None or min_games is None:
        settings = load_settings()
        if min_games is None:
            min_games = settings.min_games
        if client is None:
            async with SlippiClient.from_settings(settings) as owned:
                return await get_ranks(codes, client=owned, min_games=min_games)

    records = await _fetch_all(client, codes)
    eligible = [r for r in records if is_eligible(r, min_games)]
    logger.info("Leaderboard: %d of %d players have at least %d games", len(eligible), len(records), min_games)
    return sort_by_rating(eligible)
