"""Tests for runtime log level switching and the CLI verbose flag."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from tagcart.cli.main import main
from tagcart.runtime import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_FORMAT_DEBUG, get_logger, set_log_level
from tagcart.runtime.logging import LOGGER_NAMESPACE


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    get_logger(__name__)
    logger = logging.getLogger(LOGGER_NAMESPACE)
    level = logger.level
    yield logger
    set_log_level(level or DEFAULT_LOG_LEVEL)


def _formats(logger: logging.Logger) -> list[str | None]:
    return [handler.formatter._fmt if handler.formatter else None for handler in logger.handlers]


def test_set_log_level_switches_format(package_logger: logging.Logger) -> None:
    assert package_logger.handlers

    set_log_level(logging.DEBUG)
    assert package_logger.level == logging.DEBUG
    assert set(_formats(package_logger)) == {LOG_FORMAT_DEBUG}

    set_log_level(logging.WARNING)
    assert package_logger.level == logging.WARNING
    assert set(_formats(package_logger)) == {LOG_FORMAT}


def test_cli_verbose_enables_debug_logging(package_logger: logging.Logger, capsys) -> None:
    set_log_level(logging.INFO)

    code = main(["--verbose", "rules", "--default-rules"])

    assert code == 0
    assert package_logger.level == logging.DEBUG
    assert set(_formats(package_logger)) == {LOG_FORMAT_DEBUG}
    assert capsys.readouterr().out.startswith("- Combo discount")


def test_cli_without_verbose_keeps_log_level(package_logger: logging.Logger, capsys) -> None:
    set_log_level(logging.INFO)

    assert main(["rules", "--default-rules"]) == 0
    assert package_logger.level == logging.INFO
