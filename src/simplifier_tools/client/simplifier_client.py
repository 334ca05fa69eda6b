"""
Simplifier Low Code Platform REST client.

All calls are asynchronous and authenticate with the SimplifierToken header.
Failures surface as SimplifierApiError; nothing is retried here.
"""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from simplifier_tools.credentials import CredentialError, CredentialManager
from simplifier_tools.utils.api_handler import SimplifierApiError, handle_api_response

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
LOGIN_METHODS_PATH = "/UserInterface/api/login-methods"
AUTH_SETTINGS_PATH = "/UserInterface/api/AuthSettings"
PING_PATH = "/client/2.0/ping"


class SimplifierClient:
    """Client for the Simplifier REST API."""

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self._token = token
        self.timeout = timeout

    @property
    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._token:
            headers["SimplifierToken"] = self._token
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        json: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.request(
                    method,
                    url,
                    headers=self._headers,
                    json=json,
                    params=params,
                )
            except httpx.TimeoutException as e:
                raise SimplifierApiError(f"Request to {url} timed out") from e
            except httpx.RequestError as e:
                raise SimplifierApiError(f"Failed to make request to {url}: {e}") from e
        return handle_api_response(response)

    async def ping(self) -> bool:
        """Return True when the instance answers the ping endpoint with 'pong'."""
        result = await self._request("GET", PING_PATH)
        return "pong" in str(result).lower()

    async def list_login_methods(self) -> dict[str, Any]:
        return await self._request("GET", LOGIN_METHODS_PATH)

    async def get_login_method_details(self, name: str) -> dict[str, Any]:
        """Fetch one login method. Raises SimplifierApiError when it does not exist."""
        return await self._request("GET", f"{LOGIN_METHODS_PATH}/{quote(name, safe='')}")

    async def create_login_method(self, request: dict[str, Any]) -> Any:
        logger.info("Creating login method %s", request.get("name"))
        return await self._request("POST", LOGIN_METHODS_PATH, json=request)

    async def update_login_method(
        self, request: dict[str, Any], existing: dict[str, Any]
    ) -> Any:
        """Replace the login method identified by ``existing`` with ``request``."""
        name = existing.get("name") or request["name"]
        logger.info("Updating login method %s", name)
        return await self._request(
            "PUT", f"{LOGIN_METHODS_PATH}/{quote(name, safe='')}", json=request
        )

    async def list_oauth2_clients(self) -> dict[str, Any]:
        return await self._request("GET", AUTH_SETTINGS_PATH, params={"mechanism": "OAuth2"})


def create_client_from_credentials(credentials: CredentialManager) -> SimplifierClient:
    """Create a client from the configured base URL and SimplifierToken."""
    base_url = credentials.get("simplifier_base_url")
    if not base_url:
        raise CredentialError("SIMPLIFIER_BASE_URL environment variable is required")
    return SimplifierClient(base_url, token=credentials.get("simplifier_token"))
