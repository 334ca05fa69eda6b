"""
Uniform failure payload for tool calls.

Tools run their work through wrap_tool_result so agents get the platform's
result unchanged, or ``{"error": "Tool <caption> failed: ..."}``.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)


async def wrap_tool_result(caption: str, fn: Callable[[], Awaitable[Any]]) -> Any:
    try:
        return await fn()
    except Exception as e:
        logger.warning("Tool %s failed", caption, exc_info=True)
        return {"error": f"Tool {caption} failed: {e}"}
