"""Fixtures for login method tests."""

from unittest.mock import AsyncMock

import pytest


def make_existing_login_method(kind: str, **overrides):
    """Existing login method as returned by the platform's details endpoint."""
    type_info = {
        "UserCredentials": ("Basic Auth", "Username/Password"),
        "OAuth2": ("OAuth2", "OAuth2-based authentication"),
        "Token": ("Token", "Token-based authentication"),
        "SingleSignOn": ("SAP SSO", "SAP Single Sign-On"),
    }[kind]
    existing = {
        "name": "ExistingAuth",
        "description": "Old description",
        "loginMethodType": {
            "technicalName": kind,
            "i18n": type_info[0],
            "descriptionI18n": type_info[1],
            "sources": [],
            "targets": [],
            "supportedConnectors": ["REST"],
        },
        "source": 1,
        "target": 0,
        "sourceConfiguration": {},
        "configuration": {},
    }
    existing.update(overrides)
    return existing


@pytest.fixture
def existing_factory():
    return make_existing_login_method


@pytest.fixture
def client():
    """Remote client double with no existing login method."""
    client = AsyncMock()
    client.get_login_method_details.side_effect = Exception("Not found")
    client.create_login_method.return_value = "Created"
    client.update_login_method.return_value = "Updated"
    client.list_oauth2_clients.return_value = {
        "authSettings": [
            {"name": "infraOIDC", "mechanism": "OAuth2", "description": "", "hasIcon": False},
            {"name": "testClient", "mechanism": "OAuth2", "description": "", "hasIcon": False},
        ]
    }
    return client
