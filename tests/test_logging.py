"""Tests for simplifier_tools logging configuration."""

import logging
import sys

import pytest

from simplifier_tools.utils import configure_logging


@pytest.fixture
def base_logger():
    logger = logging.getLogger("simplifier_tools")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_configure_logging_is_idempotent(base_logger):
    configure_logging()
    configure_logging()

    marked = [h for h in base_logger.handlers if getattr(h, "_simplifier_tools_logging_handler", False)]
    assert len(marked) == 1
    assert marked[0].stream is sys.stderr
    assert base_logger.propagate is False


def test_level_from_environment(base_logger, monkeypatch):
    monkeypatch.setenv("SIMPLIFIER_TOOLS_LOG_LEVEL", "debug")
    configure_logging()
    assert base_logger.level == logging.DEBUG


def test_invalid_level_falls_back_to_info(base_logger):
    configure_logging(level="chatty")
    assert base_logger.level == logging.INFO
