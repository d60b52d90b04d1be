import logging
import sys

PACKAGE_LOGGER = "slippi_ranks"

_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(process)d] %(message)s"


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Set the package log level and make sure its records are visible.

    Function runtimes usually own the root logger. When it already has a
    handler, package records propagate there and nothing is added; otherwise
    a stderr handler is attached to the package logger only.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not logging.getLogger().handlers and not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger
