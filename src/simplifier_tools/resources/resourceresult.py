from __future__ import annotations

import json
import logging
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)


async def wrap_resource_result(uri: str, fn: Callable[[], Awaitable[Any]]) -> str:
    """Run a resource read and return its JSON text, or a JSON error object."""
    try:
        result = await fn()
    except Exception as e:
        logger.warning("Resource %s failed", uri, exc_info=True)
        return json.dumps({"error": f"Could not get data! {e}"})
    return json.dumps(result, indent=2)
