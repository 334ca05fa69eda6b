"""
Login Method Tool - create or update a Simplifier login method.

A login method is the named authentication configuration connectors use for
outbound calls. The tool takes semantic parameters (username/password, token,
OAuth2 client name, ...) and leaves the source/target code mapping to the
mappers in this package.

Credentials: SIMPLIFIER_BASE_URL and SIMPLIFIER_TOKEN.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from fastmcp import FastMCP

from simplifier_tools.client import SimplifierClient, create_client_from_credentials
from simplifier_tools.credentials import LOGIN_METHOD_TOOLS, CredentialManager

from ..toolresult import wrap_tool_result
from .upsert import upsert_login_method

LoginMethodKindName = Literal["UserCredentials", "OAuth2", "Token", "SingleSignOn"]
SourceTypeName = Literal[
    "Default",
    "Provided",
    "Reference",
    "SystemReference",
    "ProfileReference",
    "UserAttributeReference",
]
TargetTypeName = Literal["Default", "CustomHeader", "QueryParameter"]


def register_tools(
    mcp: FastMCP,
    credentials: Optional[CredentialManager] = None,
    client: Optional[SimplifierClient] = None,
) -> None:
    """Register login method tools with the MCP server."""

    def _get_client() -> SimplifierClient:
        if client is not None:
            return client
        creds = credentials or CredentialManager()
        creds.validate_for_tools(LOGIN_METHOD_TOOLS)
        return create_client_from_credentials(creds)

    @mcp.tool()
    async def loginmethod_update(
        loginMethodKind: LoginMethodKindName,
        name: str,
        description: str,
        sourceType: Optional[SourceTypeName] = None,
        targetType: Optional[TargetTypeName] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        changePassword: bool = False,
        oauth2ClientName: Optional[str] = None,
        token: Optional[str] = None,
        changeToken: bool = False,
        ticket: Optional[str] = None,
        changeTicket: bool = False,
        profileKey: Optional[str] = None,
        userAttributeName: Optional[str] = None,
        userAttributeCategory: Optional[str] = None,
        customHeaderName: Optional[str] = None,
        queryParameterKey: Optional[str] = None,
    ) -> Any:
        """
        Create or update a Login Method in Simplifier.

        The login method is updated when one with the same name exists, otherwise
        it is created. Secrets (password, token, ticket) must be passed again on
        update; set the matching change flag to true to actually replace the
        stored secret.

        Args:
            loginMethodKind: UserCredentials (BasicAuth), OAuth2, Token or
                SingleSignOn (SAP-SSO)
            name: Name of the login method
            description: Description of the login method
            sourceType: Where the credential comes from. Defaults: Provided for
                UserCredentials, Default for OAuth2, Token and SingleSignOn.
                OAuth2: Default, Reference, ProfileReference, UserAttributeReference.
                UserCredentials: Provided, ProfileReference, UserAttributeReference.
                Token/SingleSignOn: Default, SystemReference, Provided,
                ProfileReference, UserAttributeReference.
            targetType: How the credential is sent (default: Default).
                CustomHeader for Token and OAuth2, QueryParameter for OAuth2 only.
                Unsupported values fall back to Default.
            username: [UserCredentials Provided] Username
            password: [UserCredentials Provided] Password
            changePassword: [UserCredentials Provided] True on update to replace the password
            oauth2ClientName: [OAuth2 Default/Reference] OAuth2 client name
                (discover via simplifier://oauthclients)
            token: [Token Provided] Token value
            changeToken: [Token Provided] True on update to replace the token
            ticket: [SingleSignOn Provided] SAP login ticket
            changeTicket: [SingleSignOn Provided] True on update to replace the ticket
            profileKey: [ProfileReference] Key name in the user's profile
            userAttributeName: [UserAttributeReference] Name of the user attribute
            userAttributeCategory: [UserAttributeReference] Category of the user attribute
            customHeaderName: [CustomHeader target] Header name
            queryParameterKey: [QueryParameter target] Query parameter key

        Returns:
            The platform's create or update result, or a dict with an error
        """
        params: dict[str, Any] = {
            "loginMethodKind": loginMethodKind,
            "name": name,
            "description": description,
            "sourceType": sourceType,
            "targetType": targetType,
            "username": username,
            "password": password,
            "changePassword": changePassword,
            "oauth2ClientName": oauth2ClientName,
            "token": token,
            "changeToken": changeToken,
            "ticket": ticket,
            "changeTicket": changeTicket,
            "profileKey": profileKey,
            "userAttributeName": userAttributeName,
            "userAttributeCategory": userAttributeCategory,
            "customHeaderName": customHeaderName,
            "queryParameterKey": queryParameterKey,
        }

        async def _run() -> Any:
            return await upsert_login_method(_get_client(), params)

        return await wrap_tool_result(f"create or update Login Method {name}", _run)
