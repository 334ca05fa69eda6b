"""
Centralized credential management for Simplifier Tools.

Usage:
    from simplifier_tools.credentials import CredentialManager

    credentials = CredentialManager()
    credentials.validate_startup()
    base_url = credentials.get("simplifier_base_url")

    # In tests
    creds = CredentialManager.for_testing({"simplifier_token": "test-token"})
"""

from .base import CredentialError, CredentialManager, CredentialSpec
from .simplifier import LOGIN_METHOD_TOOLS, SIMPLIFIER_CREDENTIALS

CREDENTIAL_SPECS = {
    **SIMPLIFIER_CREDENTIALS,
}

__all__ = [
    "CredentialSpec",
    "CredentialManager",
    "CredentialError",
    "CREDENTIAL_SPECS",
    "SIMPLIFIER_CREDENTIALS",
    "LOGIN_METHOD_TOOLS",
]
