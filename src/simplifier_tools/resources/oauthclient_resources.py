"""
OAuth2 client resource - names usable as oauth2ClientName for OAuth2 login methods.
"""

from __future__ import annotations

from typing import Any, Callable

from fastmcp import FastMCP

from simplifier_tools.client import OAuth2Client, SimplifierClient

from .resourceresult import wrap_resource_result

OAUTH_CLIENTS_URI = "simplifier://oauthclients"


def summarize_oauth2_clients(response: dict[str, Any]) -> dict[str, Any]:
    clients = [OAuth2Client.model_validate(c) for c in response.get("authSettings", [])]
    return {
        "oauthClients": [
            {
                "name": c.name,
                "description": c.description,
                "mechanism": c.mechanism,
                "hasIcon": c.has_icon,
            }
            for c in clients
        ],
        "totalCount": len(clients),
        "usage": "Use the 'name' field as oauth2ClientName when creating OAuth2 login methods",
    }


def register_resources(
    mcp: FastMCP,
    get_client: Callable[[], SimplifierClient],
) -> None:
    """Register OAuth2 client resources with the MCP server."""

    @mcp.resource(
        OAUTH_CLIENTS_URI,
        name="oauthclients-list",
        description=(
            "List the OAuth2 clients configured in the Simplifier instance. Their names "
            "are the oauth2ClientName values accepted by loginmethod_update."
        ),
        mime_type="application/json",
    )
    async def list_oauth_clients() -> str:
        async def _run() -> dict[str, Any]:
            return summarize_oauth2_clients(await get_client().list_oauth2_clients())

        return await wrap_resource_result(OAUTH_CLIENTS_URI, _run)
