from slippi_ranks.domain.rank import PlayerCode, RankRecord
from slippi_ranks.domain.tier import GRANDMASTER, TIER_LABELS, TIER_THRESHOLDS, tier_for_rating, tier_index

__all__ = ["GRANDMASTER", "TIER_LABELS", "TIER_THRESHOLDS", "PlayerCode", "RankRecord", "tier_for_rating", "tier_index"]
