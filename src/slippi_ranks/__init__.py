"""Slippi ranked leaderboard builder.

Looks up ranked netplay profiles for a list of connect codes, classifies
each rating into a tier and returns the eligible players sorted by rating.

Public API:
    get_ranks(codes) -> list[RankRecord] (async)
    fetch_leaderboard(codes) -> list[dict]
    tier_for_rating(rating) -> str

Example usage:
    from slippi_ranks import fetch_leaderboard

    leaderboard = fetch_leaderboard(["ABCD#123", "EFGH#456"])
"""

from slippi_ranks.domain.rank import RankRecord
from slippi_ranks.domain.tier import tier_for_rating
from slippi_ranks.exceptions import ConfigurationError, RemoteLookupError, SlippiRanksException
from slippi_ranks.handler import fetch_leaderboard
from slippi_ranks.leaderboard import get_ranks

__all__ = [
    "ConfigurationError",
    "RankRecord",
    "RemoteLookupError",
    "SlippiRanksException",
    "fetch_leaderboard",
    "get_ranks",
    "tier_for_rating",
]
