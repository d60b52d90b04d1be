class SlippiRanksException(Exception):
    """Base exception for slippi-ranks errors."""


class ConfigurationError(SlippiRanksException):
    """Raised when a configuration value is missing or invalid."""


class RemoteLookupError(SlippiRanksException):
    """Raised when the ranked profile for a connect code could not be fetched or parsed."""

    def __init__(self, code: str, reason: str) -> None:
        self.code = code
        self.reason = reason
        super().__init__(f"Rank lookup failed for {code}: {reason}")
