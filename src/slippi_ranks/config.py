from __future__ import annotations

from dataclasses import dataclass

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from slippi_ranks.exceptions import ConfigurationError

DEFAULT_ENDPOINT = "https://gql-gateway-dot-slippi.uc.r.appspot.com/graphql"

_DEFAULTS: dict[str, object] = {
    "slippi": {
        "endpoint": DEFAULT_ENDPOINT,
        "timeout": 10.0,
        "connect_timeout": 5.0,
    },
    "rate_limit": {
        "per_second": 1.0,
    },
    "leaderboard": {
        "min_games": 5,
    },
    "logging": {
        "verbose": False,
    },
}


@dataclass(frozen=True)
class RankSettings:
    """Resolved runtime settings.

    Attributes:
        endpoint: GraphQL gateway URL.
        timeout: Overall per-request timeout in seconds.
        connect_timeout: Connection timeout in seconds.
        requests_per_second: Refill rate of the process-wide request budget.
        min_games: Minimum wins + losses for a player to appear on the leaderboard.
        verbose: Emit debug logging, including HTTP client internals.
    """

    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = 10.0
    connect_timeout: float = 5.0
    requests_per_second: float = 1.0
    min_games: int = 5
    verbose: bool = False


def create_config(
    yaml_path: str = "slippi_ranks.yaml",
    env_prefix: str = "SLIPPI_RANKS",
    defaults: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): env vars > YAML file > defaults dict.
    """
    if defaults is None:
        defaults = _DEFAULTS
    return ConfigurationSet(
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    )


def _as_float(cfg: ConfigurationSet, key: str) -> float:
    try:
        value = float(str(cfg[key]))
    except ValueError as e:
        raise ConfigurationError(f"{key} must be a number: {e}") from e
    if value <= 0:
        raise ConfigurationError(f"{key} must be positive, got {value}")
    return value


def _as_bool(value: object) -> bool:
    # env vars arrive as strings
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def load_settings(cfg: ConfigurationSet | None = None) -> RankSettings:
    if cfg is None:
        cfg = create_config()
    try:
        min_games = int(str(cfg["leaderboard.min_games"]))
    except ValueError as e:
        raise ConfigurationError(f"leaderboard.min_games must be an integer: {e}") from e
    if min_games < 0:
        raise ConfigurationError(f"leaderboard.min_games must not be negative, got {min_games}")
    return RankSettings(
        endpoint=str(cfg["slippi.endpoint"]),
        timeout=_as_float(cfg, "slippi.timeout"),
        connect_timeout=_as_float(cfg, "slippi.connect_timeout"),
        requests_per_second=_as_float(cfg, "rate_limit.per_second"),
        min_games=min_games,
        verbose=_as_bool(cfg["logging.verbose"]),
    )
