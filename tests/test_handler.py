import json
from collections.abc import Sequence

import pytest

import slippi_ranks.handler as handler_module
from slippi_ranks.domain.rank import RankRecord
from slippi_ranks.exceptions import RemoteLookupError
from slippi_ranks.handler import fetch_leaderboard, handler

_RECORDS = [
    RankRecord(tag="Zain", code="ZAIN#0", tier="Grandmaster", rating=2300.0, wins=40, losses=5, main_character="MARTH"),
    RankRecord(tag="Axe", code="AXE#1", tier="Diamond 3", rating=2150.25, wins=20, losses=9, main_character="PIKACHU"),
]


@pytest.fixture
def fake_get_ranks(monkeypatch: pytest.MonkeyPatch) -> list[list[str]]:
    calls: list[list[str]] = []

    async def _get_ranks(codes: Sequence[str]) -> list[RankRecord]:
        calls.append(list(codes))
        if "BAD#000" in codes:
            raise RemoteLookupError("BAD#000", "connect code not found")
        return _RECORDS

    monkeypatch.setattr(handler_module, "get_ranks", _get_ranks)
    monkeypatch.setattr(handler_module, "_logging_configured", True)
    return calls


class TestFetchLeaderboard:
    def test_returns_serialized_records(self, fake_get_ranks: list[list[str]]) -> None:
        result = fetch_leaderboard(("ZAIN#0", "AXE#1"))
        assert fake_get_ranks == [["ZAIN#0", "AXE#1"]]
        assert result == [r.to_dict() for r in _RECORDS]
        json.dumps(result)

    def test_propagates_lookup_error(self, fake_get_ranks: list[list[str]]) -> None:
        with pytest.raises(RemoteLookupError) as exc_info:
            fetch_leaderboard(["GOOD#111", "BAD#000"])
        assert exc_info.value.code == "BAD#000"


class TestHandler:
    def test_direct_event(self, fake_get_ranks: list[list[str]]) -> None:
        response = handler({"players": ["ZAIN#0", "AXE#1"]})
        assert response["statusCode"] == 200
        assert response["headers"]["content-type"] == "application/json"
        body = json.loads(response["body"])
        assert [entry["code"] for entry in body] == ["ZAIN#0", "AXE#1"]
        assert body[0] == {
            "tag": "Zain",
            "code": "ZAIN#0",
            "rank": "Grandmaster",
            "elo": 2300.0,
            "wins": 40,
            "losses": 5,
            "character": "MARTH",
        }

    def test_json_string_body(self, fake_get_ranks: list[list[str]]) -> None:
        response = handler({"body": json.dumps({"players": ["ZAIN#0"]})})
        assert response["statusCode"] == 200
        assert fake_get_ranks == [["ZAIN#0"]]

    def test_lookup_error_is_bad_gateway(self, fake_get_ranks: list[list[str]]) -> None:
        response = handler({"players": ["GOOD#111", "BAD#000"]})
        assert response["statusCode"] == 502
        body = json.loads(response["body"])
        assert body["code"] == "BAD#000"
        assert "BAD#000" in body["error"]

    @pytest.mark.parametrize(
        "event",
        [
            {},
            {"players": "ZAIN#0"},
            {"players": ["ZAIN#0", ""]},
            {"players": [1, 2]},
            {"body": "not json"},
            {"body": "[1, 2]"},
        ],
    )
    def test_malformed_request_is_bad_request(self, event: dict[str, object], fake_get_ranks: list[list[str]]) -> None:
        response = handler(event)
        assert response["statusCode"] == 400
        assert "error" in json.loads(response["body"])
        assert fake_get_ranks == []
