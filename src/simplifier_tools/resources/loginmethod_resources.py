"""
Login method resources - discover configured login methods and their details.

    simplifier://loginmethods                      list of all login methods
    simplifier://loginmethod/{loginMethodName}     one login method with resolved source/target names
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from fastmcp import FastMCP

from simplifier_tools.client import LoginMethodDetails, LoginMethodSummary, SimplifierClient

from .resourceresult import wrap_resource_result

LIST_URI = "simplifier://loginmethods"
DETAILS_URI = "simplifier://loginmethod/{loginMethodName}"


def summarize_login_methods(response: dict[str, Any]) -> dict[str, Any]:
    login_methods = [
        LoginMethodSummary.model_validate(lm) for lm in response.get("loginMethods", [])
    ]
    return {
        "loginMethods": [
            {
                "uri": f"simplifier://loginmethod/{lm.name}",
                "name": lm.name,
                "description": lm.description,
                "type": lm.login_method_type.technical_name,
                "supportedConnectors": lm.login_method_type.supported_connectors,
                "updateInfo": lm.update_info,
            }
            for lm in login_methods
        ],
        "totalCount": len(login_methods),
        "resourcePatterns": [
            f"{LIST_URI} - List all login methods",
            f"{DETAILS_URI} - Specific login method details",
        ],
    }


def describe_login_method(raw: dict[str, Any]) -> dict[str, Any]:
    """Tag configurations with their login method type and resolve source/target ids to names."""
    details = LoginMethodDetails.model_validate(raw)
    type_info = details.login_method_type
    type_name = type_info.technical_name

    target_configuration = None
    if details.target_configuration:
        target_configuration = {"target": details.target, **details.target_configuration}

    return {
        "name": details.name,
        "description": details.description,
        "type": type_name,
        "source": {"id": details.source, "name": type_info.source_name(details.source)},
        "target": {"id": details.target, "name": type_info.target_name(details.target)},
        "sourceConfiguration": {
            "type": type_name,
            "source": details.source,
            **details.source_configuration,
        },
        "targetConfiguration": target_configuration,
        "configuration": {"type": type_name, **details.configuration},
        "supportedConnectors": type_info.supported_connectors,
        "loginMethodType": type_info.model_dump(by_alias=True),
    }


def register_resources(
    mcp: FastMCP,
    get_client: Callable[[], SimplifierClient],
) -> None:
    """Register login method resources with the MCP server."""

    @mcp.resource(
        LIST_URI,
        name="loginmethods-list",
        description=(
            "List all login methods of the Simplifier instance. Login methods handle "
            "authentication for connectors (BasicAuth, OAuth2, Token, SAP SSO, ...). "
            "Each entry links to simplifier://loginmethod/{name} for details."
        ),
        mime_type="application/json",
    )
    async def list_login_methods() -> str:
        async def _run() -> dict[str, Any]:
            return summarize_login_methods(await get_client().list_login_methods())

        return await wrap_resource_result(LIST_URI, _run)

    @mcp.resource(
        DETAILS_URI,
        name="loginmethod-details",
        description=(
            "Configuration of one login method: source configuration (where the "
            "credential comes from), target configuration (where it is placed) and "
            "method specific settings."
        ),
        mime_type="application/json",
    )
    async def get_login_method(loginMethodName: str) -> str:
        uri = f"simplifier://loginmethod/{loginMethodName}"

        async def _run() -> dict[str, Any]:
            if not loginMethodName:
                raise ValueError("Login method name is required in URI path")
            raw: Optional[dict[str, Any]] = await get_client().get_login_method_details(
                loginMethodName
            )
            return describe_login_method(raw or {})

        return await wrap_resource_result(uri, _run)
