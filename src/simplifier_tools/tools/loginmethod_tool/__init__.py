"""
Login Method Tool - Create or update Simplifier login methods.

Supports UserCredentials (BasicAuth), OAuth2, Token and SAP Single Sign-On.
"""

from .loginmethod_tool import register_tools
from .mappers import MAPPERS, get_mapper
from .mapping import (
    LoginMethodKind,
    LoginMethodValidationError,
    SourceKind,
    SourceMapping,
    TargetAndSourceMapper,
    TargetKind,
    TargetMapping,
)
from .upsert import upsert_login_method

__all__ = [
    "register_tools",
    "MAPPERS",
    "get_mapper",
    "LoginMethodKind",
    "LoginMethodValidationError",
    "SourceKind",
    "SourceMapping",
    "TargetAndSourceMapper",
    "TargetKind",
    "TargetMapping",
    "upsert_login_method",
]
