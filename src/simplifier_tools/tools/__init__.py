"""
Simplifier Tools - Tool implementations for FastMCP.

Usage:
    from fastmcp import FastMCP
    from simplifier_tools.tools import register_all_tools
    from simplifier_tools.credentials import CredentialManager

    mcp = FastMCP("my-server")
    credentials = CredentialManager()
    register_all_tools(mcp, credentials=credentials)
"""
from typing import TYPE_CHECKING, List, Optional

from fastmcp import FastMCP

from .loginmethod_tool import register_tools as register_loginmethod

if TYPE_CHECKING:
    from simplifier_tools.client import SimplifierClient
    from simplifier_tools.credentials import CredentialManager


def register_all_tools(
    mcp: FastMCP,
    credentials: Optional["CredentialManager"] = None,
    client: Optional["SimplifierClient"] = None,
) -> List[str]:
    """
    Register all tools with a FastMCP server.

    Args:
        mcp: FastMCP server instance
        credentials: Optional CredentialManager; a default one reading the
                     environment is created per call when omitted.
        client: Optional pre-built SimplifierClient (overrides credentials)

    Returns:
        List of registered tool names
    """
    register_loginmethod(mcp, credentials=credentials, client=client)

    return [
        "loginmethod_update",
    ]


__all__ = ["register_all_tools"]
