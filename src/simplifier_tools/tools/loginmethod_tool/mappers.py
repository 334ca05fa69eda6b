"""
Concrete source/target mappers, one per login method kind.

Configuration shapes by source:
    Provided                   UserCredentials {username, password}, Token {token},
                               SAP-SSO {ticket}; plus the change flag on update
    Default, Reference         OAuth2 {clientName}
    Default, SystemReference   Token and SAP-SSO {} (SimplifierToken or login ticket)
    ProfileReference           {key}
    UserAttributeReference     {name, category}
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Union

from .mapping import (
    LoginMethodKind,
    SourceKind,
    SourceRule,
    TargetAndSourceMapper,
    TargetKind,
    TargetRule,
    _raw,
)


def _empty(params: Mapping[str, Any]) -> Dict[str, Any]:
    return {}


def _user_credentials(params: Mapping[str, Any]) -> Dict[str, Any]:
    return {"username": params["username"], "password": params["password"]}


def _client_reference(params: Mapping[str, Any]) -> Dict[str, Any]:
    return {"clientName": params["oauth2ClientName"]}


def _token(params: Mapping[str, Any]) -> Dict[str, Any]:
    return {"token": params["token"]}


def _ticket(params: Mapping[str, Any]) -> Dict[str, Any]:
    return {"ticket": params["ticket"]}


def _profile_reference(params: Mapping[str, Any]) -> Dict[str, Any]:
    return {"key": params["profileKey"]}


def _user_attribute_reference(params: Mapping[str, Any]) -> Dict[str, Any]:
    return {"name": params["userAttributeName"], "category": params["userAttributeCategory"]}


PROFILE_REFERENCE = SourceRule(("profileKey",), _profile_reference)
USER_ATTRIBUTE_REFERENCE = SourceRule(
    ("userAttributeName", "userAttributeCategory"), _user_attribute_reference
)
CLIENT_REFERENCE = SourceRule(("oauth2ClientName",), _client_reference)
NO_CONFIGURATION = SourceRule((), _empty)

DEFAULT_TARGET = TargetRule()
CUSTOM_HEADER_TARGET = TargetRule("customHeaderName", "name")
QUERY_PARAMETER_TARGET = TargetRule("queryParameterKey", "key")


class UserCredentialsTargetAndSourceMapper(TargetAndSourceMapper):
    """BasicAuth. Only the Default target exists for this kind, whatever is requested."""

    kind = LoginMethodKind.USER_CREDENTIALS
    label = "UserCredentials"
    default_source_kind = SourceKind.PROVIDED
    source_rules = {
        SourceKind.PROVIDED: SourceRule(
            ("username", "password"), _user_credentials, rotation_flag="changePassword"
        ),
        SourceKind.PROFILE_REFERENCE: PROFILE_REFERENCE,
        SourceKind.USER_ATTRIBUTE_REFERENCE: USER_ATTRIBUTE_REFERENCE,
    }
    target_rules = {}


class OAuthTargetAndSourceMapper(TargetAndSourceMapper):
    """OAuth2 via a configured OAuth2 client. Token goes to header or query parameter."""

    kind = LoginMethodKind.OAUTH2
    label = "OAuth2"
    default_source_kind = SourceKind.DEFAULT
    source_rules = {
        SourceKind.DEFAULT: CLIENT_REFERENCE,
        SourceKind.REFERENCE: CLIENT_REFERENCE,
        SourceKind.PROFILE_REFERENCE: PROFILE_REFERENCE,
        SourceKind.USER_ATTRIBUTE_REFERENCE: USER_ATTRIBUTE_REFERENCE,
    }
    target_rules = {
        TargetKind.DEFAULT: DEFAULT_TARGET,
        TargetKind.CUSTOM_HEADER: CUSTOM_HEADER_TARGET,
        TargetKind.QUERY_PARAMETER: QUERY_PARAMETER_TARGET,
    }


class TokenTargetAndSourceMapper(TargetAndSourceMapper):
    kind = LoginMethodKind.TOKEN
    label = "Token"
    default_source_kind = SourceKind.DEFAULT
    source_rules = {
        SourceKind.DEFAULT: NO_CONFIGURATION,
        SourceKind.SYSTEM_REFERENCE: NO_CONFIGURATION,
        SourceKind.PROVIDED: SourceRule(("token",), _token, rotation_flag="changeToken"),
        SourceKind.PROFILE_REFERENCE: PROFILE_REFERENCE,
        SourceKind.USER_ATTRIBUTE_REFERENCE: USER_ATTRIBUTE_REFERENCE,
    }
    target_rules = {
        TargetKind.DEFAULT: DEFAULT_TARGET,
        TargetKind.CUSTOM_HEADER: CUSTOM_HEADER_TARGET,
    }


class SAPSSOTargetAndSourceMapper(TargetAndSourceMapper):
    """SAP Single Sign-On with a login ticket."""

    kind = LoginMethodKind.SINGLE_SIGN_ON
    label = "SAP-SSO"
    default_source_kind = SourceKind.DEFAULT
    source_rules = {
        SourceKind.DEFAULT: NO_CONFIGURATION,
        SourceKind.SYSTEM_REFERENCE: NO_CONFIGURATION,
        SourceKind.PROVIDED: SourceRule(("ticket",), _ticket, rotation_flag="changeTicket"),
        SourceKind.PROFILE_REFERENCE: PROFILE_REFERENCE,
        SourceKind.USER_ATTRIBUTE_REFERENCE: USER_ATTRIBUTE_REFERENCE,
    }
    target_rules = {
        TargetKind.DEFAULT: DEFAULT_TARGET,
    }


MAPPERS: Dict[LoginMethodKind, TargetAndSourceMapper] = {
    LoginMethodKind.USER_CREDENTIALS: UserCredentialsTargetAndSourceMapper(),
    LoginMethodKind.OAUTH2: OAuthTargetAndSourceMapper(),
    LoginMethodKind.TOKEN: TokenTargetAndSourceMapper(),
    LoginMethodKind.SINGLE_SIGN_ON: SAPSSOTargetAndSourceMapper(),
}


def get_mapper(kind: Union[LoginMethodKind, str]) -> TargetAndSourceMapper:
    """Return the mapper for a login method kind. Unknown kinds raise KeyError."""
    try:
        return MAPPERS[LoginMethodKind(_raw(kind))]
    except ValueError:
        raise KeyError(f"Unsupported loginMethodType: {_raw(kind)}") from None
