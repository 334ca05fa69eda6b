"""Logging setup for the simplifier_tools package."""

from __future__ import annotations

import logging
import os
import sys

_HANDLER_ATTR = "_simplifier_tools_logging_handler"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """
    Attach a stderr handler to the ``simplifier_tools`` logger.

    Repeated calls are no-ops. Level and format fall back to
    SIMPLIFIER_TOOLS_LOG_LEVEL and SIMPLIFIER_TOOLS_LOG_FORMAT; an unknown
    level name means INFO.
    """
    base_logger = logging.getLogger("simplifier_tools")
    if any(getattr(h, _HANDLER_ATTR, False) for h in base_logger.handlers):
        return

    level_name = (level or os.getenv("SIMPLIFIER_TOOLS_LOG_LEVEL", "INFO")).upper()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(fmt or os.getenv("SIMPLIFIER_TOOLS_LOG_FORMAT", DEFAULT_FORMAT))
    )
    setattr(handler, _HANDLER_ATTR, True)

    try:
        base_logger.setLevel(level_name)
    except ValueError:
        base_logger.setLevel(logging.INFO)

    # stdout carries JSON-RPC in STDIO mode
    base_logger.addHandler(handler)
    base_logger.propagate = False
