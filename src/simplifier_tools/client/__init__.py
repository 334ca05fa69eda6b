"""
Simplifier REST client.
"""

from .simplifier_client import SimplifierClient, create_client_from_credentials
from .types import (
    LoginMethodDetails,
    LoginMethodSummary,
    LoginMethodTypeInfo,
    OAuth2Client,
)

__all__ = [
    "SimplifierClient",
    "create_client_from_credentials",
    "LoginMethodDetails",
    "LoginMethodSummary",
    "LoginMethodTypeInfo",
    "OAuth2Client",
]
