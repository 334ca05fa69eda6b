"""
Simplifier Tools - MCP tools for the Simplifier Low Code Platform.

Usage:
    from fastmcp import FastMCP
    from simplifier_tools import register_all_tools, register_all_resources
    from simplifier_tools.credentials import CredentialManager

    mcp = FastMCP("simplifier")
    credentials = CredentialManager()
    register_all_tools(mcp, credentials=credentials)
    register_all_resources(mcp, credentials=credentials)
"""

__version__ = "0.1.0"

from .credentials import (
    CREDENTIAL_SPECS,
    CredentialError,
    CredentialManager,
    CredentialSpec,
)
from .resources import register_all_resources
from .tools import register_all_tools

__all__ = [
    "__version__",
    "CredentialManager",
    "CredentialSpec",
    "CredentialError",
    "CREDENTIAL_SPECS",
    "register_all_tools",
    "register_all_resources",
]
