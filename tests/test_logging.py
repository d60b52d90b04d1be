import logging

import pytest

from slippi_ranks._logging import PACKAGE_LOGGER, configure_logging


@pytest.fixture
def package_logger(monkeypatch: pytest.MonkeyPatch) -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    monkeypatch.setattr(logger, "handlers", [])
    monkeypatch.setattr(logger, "level", logging.NOTSET)
    return logger


def test_default_level_is_info(package_logger: logging.Logger) -> None:
    assert configure_logging() is package_logger
    assert package_logger.level == logging.INFO


def test_verbose_enables_debug(package_logger: logging.Logger) -> None:
    configure_logging(verbose=True)
    assert package_logger.isEnabledFor(logging.DEBUG)


def test_leaves_runtime_root_handler_alone(package_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch) -> None:
    runtime_handler = logging.NullHandler()
    monkeypatch.setattr(logging.getLogger(), "handlers", [runtime_handler])

    configure_logging()

    assert logging.getLogger().handlers == [runtime_handler]
    assert package_logger.handlers == []


def test_adds_stderr_handler_without_root_handler(
    package_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(logging.getLogger(), "handlers", [])

    configure_logging()
    configure_logging()

    assert len(package_logger.handlers) == 1
    assert isinstance(package_logger.handlers[0], logging.StreamHandler)
    assert logging.getLogger().handlers == []
