"""Rating-to-tier classification for Slippi ranked netplay."""

from bisect import bisect_right

GRANDMASTER = "Grandmaster"

# Ascending exclusive upper bounds, one per tier below Grandmaster.
TIER_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (765.43, "Bronze 1"),
    (913.72, "Bronze 2"),
    (1054.87, "Bronze 3"),
    (1188.88, "Silver 1"),
    (1315.75, "Silver 2"),
    (1435.48, "Silver 3"),
    (1548.07, "Gold 1"),
    (1653.52, "Gold 2"),
    (1751.83, "Gold 3"),
    (1843.0, "Platinum 1"),
    (1927.03, "Platinum 2"),
    (2003.92, "Platinum 3"),
    (2073.67, "Diamond 1"),
    (2136.28, "Diamond 2"),
    (2191.75, "Diamond 3"),
)

TIER_LABELS: tuple[str, ...] = (*(label for _, label in TIER_THRESHOLDS), GRANDMASTER)

_BOUNDS: tuple[float, ...] = tuple(bound for bound, _ in TIER_THRESHOLDS)


def tier_for_rating(rating: float) -> str:
    """Return the tier label for *rating*.

    The tier is the label of the first threshold strictly greater than the
    rating; ratings at or above the last threshold are Grandmaster.
    """
    return TIER_LABELS[bisect_right(_BOUNDS, rating)]


def tier_index(label: str) -> int:
    """Position of *label* in the ascending tier ordering."""
    return TIER_LABELS.index(label)
