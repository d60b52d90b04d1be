from dataclasses import dataclass
from typing import Any

PlayerCode = str


@dataclass(frozen=True)
class RankRecord:
    tag: str
    code: PlayerCode
    tier: str
    rating: float
    wins: int
    losses: int
    main_character: str
    previous_rating: float | None = None
    rating_change: str | None = None

    @property
    def games(self) -> int:
        return self.wins + self.losses

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the leaderboard entry shape consumed by the web frontend."""
        data: dict[str, Any] = {
            "tag": self.tag,
            "code": self.code,
            "rank": self.tier,
            "elo": self.rating,
            "wins": self.wins,
            "losses": self.losses,
            "character": self.main_character,
        }
        if self.previous_rating is not None:
            data["yesterdayElo"] = self.previous_rating
        if self.rating_change is not None:
            data["rankChange"] = self.rating_change
        return data
