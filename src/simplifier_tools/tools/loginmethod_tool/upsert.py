"""
Create-or-update of a named login method.

Reads the existing login method (if any), maps the caller's parameters to
source/target codes, and issues exactly one create or update call.

Concurrent upserts of the *same* name race: both may observe "not found" and
both create, or one update may overwrite the other. Callers that need
ordering must serialize per name.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from simplifier_tools.client import SimplifierClient

from .mappers import get_mapper
from .mapping import (
    LoginMethodKind,
    LoginMethodValidationError,
    SourceKind,
    TargetKind,
    _raw,
)

logger = logging.getLogger(__name__)

CLIENT_REFERENCE_SOURCES = (SourceKind.DEFAULT, SourceKind.REFERENCE)


async def find_existing_login_method(
    client: SimplifierClient, name: str
) -> Optional[Dict[str, Any]]:
    """Return the stored login method, or None when it cannot be read."""
    try:
        return await client.get_login_method_details(name)
    except Exception as e:
        logger.debug("Login method %s not readable, treating as new: %s", name, e)
        return None


async def validate_oauth2_client_name(client: SimplifierClient, client_name: str) -> None:
    """Fail unless an OAuth2 client with this name is configured on the platform."""
    response = await client.list_oauth2_clients() or {}
    names = [c.get("name") for c in response.get("authSettings", [])]
    if client_name not in names:
        available = ", ".join(n for n in names if n) or "(none)"
        raise LoginMethodValidationError(
            f"OAuth2 client '{client_name}' not found. Available clients: {available}"
        )


async def upsert_login_method(client: SimplifierClient, params: Mapping[str, Any]) -> Any:
    """
    Create or update the login method described by ``params``.

    Args:
        client: Remote Simplifier client
        params: Caller parameters (name, description, loginMethodKind, sourceType,
            targetType and the kind-specific fields)

    Returns:
        Whatever the remote create/update call returns, unmodified.

    Raises:
        LoginMethodValidationError: Parameters do not fit the source/target kind.
            Raised before the platform is contacted.
        KeyError: Unknown login method kind.
    """
    name = params["name"]
    mapper = get_mapper(params["loginMethodKind"])

    source_type = params.get("sourceType") or mapper.get_default_source_kind()
    target_type = params.get("targetType") or TargetKind.DEFAULT

    # Validate before touching the platform; the result is reused on create.
    source = mapper.map_source(source_type, params)
    target = mapper.map_target(target_type, params)

    if (
        mapper.kind is LoginMethodKind.OAUTH2
        and SourceKind(_raw(source_type)) in CLIENT_REFERENCE_SOURCES
    ):
        await validate_oauth2_client_name(client, params["oauth2ClientName"])

    existing = await find_existing_login_method(client, name)
    if existing is not None:
        source = mapper.map_source(source_type, params, existing)

    request: Dict[str, Any] = {
        "name": name,
        "description": params.get("description"),
        "loginMethodType": mapper.kind.value,
        **source.to_request(),
        **target.to_request(),
    }

    if existing is not None:
        logger.info(
            "Updating %s login method %s (source=%s, target=%s)",
            mapper.kind.value, name, source.source, target.target,
        )
        return await client.update_login_method(request, existing)

    logger.info(
        "Creating %s login method %s (source=%s, target=%s)",
        mapper.kind.value, name, source.source, target.target,
    )
    return await client.create_login_method(request)
