"""
Map Simplifier REST responses to results or SimplifierApiError.
"""

from __future__ import annotations

from typing import Any

import httpx


class SimplifierApiError(Exception):
    """Raised when the Simplifier platform rejects or fails a request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_detail(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text
    if isinstance(data, dict):
        return str(data.get("message") or data.get("error") or response.text)
    return response.text


def handle_api_response(response: httpx.Response) -> Any:
    """
    Return the decoded payload of a successful response or raise SimplifierApiError.

    Args:
        response: The HTTP response object.

    Returns:
        The ``result`` of a ``{success, result}`` envelope, otherwise the raw JSON body
        (or text when the body is not JSON).
    """
    status_code = response.status_code

    if not response.is_success:
        detail = _error_detail(response)
        if status_code == 401:
            message = "Invalid or expired Simplifier token (unauthorized)."
        elif status_code == 403:
            message = "Access denied by Simplifier (Forbidden)."
        elif status_code == 404:
            message = f"Resource not found in Simplifier: {detail}"
        elif status_code == 429:
            message = "Simplifier rate limit exceeded. Please retry later."
        else:
            message = f"Simplifier error (HTTP {status_code}): {detail}"
        raise SimplifierApiError(message, status_code)

    if not response.content:
        return None

    try:
        data = response.json()
    except ValueError:
        return response.text

    if isinstance(data, dict) and "success" in data:
        if not data["success"]:
            detail = data.get("message") or data.get("error") or "request was not successful"
            raise SimplifierApiError(f"Simplifier error: {detail}", status_code)
        if "result" in data:
            return data["result"]
    return data
