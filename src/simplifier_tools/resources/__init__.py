"""
Simplifier Tools - read-only MCP resources.
"""
from typing import List, Optional

from fastmcp import FastMCP

from simplifier_tools.client import SimplifierClient, create_client_from_credentials
from simplifier_tools.credentials import CredentialManager

from .loginmethod_resources import register_resources as register_loginmethod_resources
from .oauthclient_resources import register_resources as register_oauthclient_resources


def register_all_resources(
    mcp: FastMCP,
    credentials: Optional[CredentialManager] = None,
    client: Optional[SimplifierClient] = None,
) -> List[str]:
    """Register all resources with a FastMCP server and return their URIs."""

    def _get_client() -> SimplifierClient:
        if client is not None:
            return client
        return create_client_from_credentials(credentials or CredentialManager())

    register_loginmethod_resources(mcp, _get_client)
    register_oauthclient_resources(mcp, _get_client)

    return [
        "simplifier://loginmethods",
        "simplifier://loginmethod/{loginMethodName}",
        "simplifier://oauthclients",
    ]


__all__ = ["register_all_resources"]
