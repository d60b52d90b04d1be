"""Entry points for the hosting function runtime."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Mapping, Sequence
from typing import Any

from slippi_ranks._logging import configure_logging
from slippi_ranks.config import load_settings
from slippi_ranks.domain.rank import PlayerCode
from slippi_ranks.exceptions import RemoteLookupError
from slippi_ranks.leaderboard import get_ranks

_logging_configured = False


def fetch_leaderboard(codes: Sequence[PlayerCode]) -> list[dict[str, Any]]:
    """Synchronously build the leaderboard and return it as JSON-ready dicts.

    Raises:
        RemoteLookupError: If any player lookup fails.
    """
    records = asyncio.run(get_ranks(list(codes)))
    return [r.to_dict() for r in records]


def _response(body: object, status: int = 200) -> dict[str, Any]:
    return {"statusCode": status, "headers": {"content-type": "application/json"}, "body": json.dumps(body)}


def _parse_players(event: Mapping[str, Any]) -> list[str]:
    payload: Any = event
    body = event.get("body")
    if isinstance(body, str):
        payload = json.loads(body)
    elif isinstance(body, Mapping):
        payload = body
    if not isinstance(payload, Mapping):
        raise ValueError("request body must be a JSON object")
    players = payload.get("players")
    if not isinstance(players, list) or not all(isinstance(p, str) and p for p in players):
        raise ValueError("'players' must be a list of non-empty connect codes")
    return players


def handler(event: Mapping[str, Any], context: object = None) -> dict[str, Any]:
    """HTTP-style handler: ``{"players": [...]}`` in, leaderboard JSON out."""
    global _logging_configured
    if not _logging_configured:
        configure_logging(verbose=load_settings().verbose)
        _logging_configured = True

    try:
        players = _parse_players(event)
    except ValueError as e:
        return _response({"error": str(e)}, 400)

    try:
        leaderboard = fetch_leaderboard(players)
    except RemoteLookupError as e:
        return _response({"error": str(e), "code": e.code}, 502)
    return _response(leaderboard)
