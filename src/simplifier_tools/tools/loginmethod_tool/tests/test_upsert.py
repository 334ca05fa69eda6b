"""
Tests for the login method upsert orchestration.

Covers:
- Create path when the existence read fails
- Update path with and without secret rotation
- Defaults for sourceType / targetType
- Validation failures never reach the platform
- OAuth2 client name validation
- Remote write failures propagate unchanged
"""

from __future__ import annotations

import pytest

from simplifier_tools.tools.loginmethod_tool.mapping import LoginMethodValidationError
from simplifier_tools.tools.loginmethod_tool.upsert import (
    find_existing_login_method,
    upsert_login_method,
    validate_oauth2_client_name,
)
from simplifier_tools.utils import SimplifierApiError


class TestCreate:
    @pytest.mark.asyncio
    async def test_creates_token_with_provided_source(self, client):
        params = {
            "loginMethodKind": "Token",
            "sourceType": "Provided",
            "name": "TokenProvided",
            "description": "Token with provided token value",
            "token": "mySecretToken123",
            "changeToken": True,
        }

        result = await upsert_login_method(client, params)

        assert result == "Created"
        client.get_login_method_details.assert_awaited_once_with("TokenProvided")
        client.update_login_method.assert_not_called()
        client.create_login_method.assert_awaited_once_with(
            {
                "name": "TokenProvided",
                "description": "Token with provided token value",
                "loginMethodType": "Token",
                "source": 1,
                "target": 0,
                "sourceConfiguration": {"token": "mySecretToken123"},
            }
        )

    @pytest.mark.asyncio
    async def test_user_credentials_defaults_to_provided(self, client):
        params = {
            "loginMethodKind": "UserCredentials",
            "name": "BasicAuth",
            "description": "Basic",
            "username": "admin",
            "password": "secret",
            "changePassword": False,
        }

        await upsert_login_method(client, params)

        request = client.create_login_method.await_args.args[0]
        assert request["source"] == 1
        assert request["target"] == 0
        assert request["sourceConfiguration"] == {"username": "admin", "password": "secret"}
        assert "targetConfiguration" not in request

    @pytest.mark.asyncio
    async def test_token_defaults_to_default_source(self, client):
        params = {"loginMethodKind": "Token", "name": "SimplifierToken", "description": ""}

        await upsert_login_method(client, params)

        request = client.create_login_method.await_args.args[0]
        assert request["source"] == 0
        assert request["sourceConfiguration"] == {}

    @pytest.mark.asyncio
    async def test_oauth2_with_query_parameter_target(self, client):
        params = {
            "loginMethodKind": "OAuth2",
            "name": "MyOAuth",
            "description": "OAuth",
            "oauth2ClientName": "infraOIDC",
            "targetType": "QueryParameter",
            "queryParameterKey": "access_token",
        }

        await upsert_login_method(client, params)

        request = client.create_login_method.await_args.args[0]
        assert request == {
            "name": "MyOAuth",
            "description": "OAuth",
            "loginMethodType": "OAuth2",
            "source": 0,
            "target": 2,
            "sourceConfiguration": {"clientName": "infraOIDC"},
            "targetConfiguration": {"key": "access_token"},
        }

    @pytest.mark.asyncio
    async def test_unsupported_target_becomes_default(self, client):
        params = {
            "loginMethodKind": "Token",
            "name": "T",
            "description": "",
            "targetType": "QueryParameter",
            "queryParameterKey": "k",
        }

        await upsert_login_method(client, params)

        request = client.create_login_method.await_args.args[0]
        assert request["target"] == 0
        assert "targetConfiguration" not in request


class TestUpdate:
    @pytest.mark.asyncio
    async def test_update_without_rotation(self, client, existing_factory):
        existing = existing_factory("Token", name="TokenProvided")
        client.get_login_method_details.side_effect = None
        client.get_login_method_details.return_value = existing
        params = {
            "loginMethodKind": "Token",
            "sourceType": "Provided",
            "name": "TokenProvided",
            "description": "Updated description only",
            "token": "<not relevant>",
            "changeToken": False,
        }

        result = await upsert_login_method(client, params)

        assert result == "Updated"
        client.create_login_method.assert_not_called()
        request, passed_existing = client.update_login_method.await_args.args
        assert passed_existing is existing
        assert request["description"] == "Updated description only"
        assert request["sourceConfiguration"]["changeToken"] is False
        assert request["sourceConfiguration"]["token"] == "<not relevant>"

    @pytest.mark.asyncio
    async def test_update_with_rotation(self, client, existing_factory):
        client.get_login_method_details.side_effect = None
        client.get_login_method_details.return_value = existing_factory("Token")
        params = {
            "loginMethodKind": "Token",
            "sourceType": "Provided",
            "name": "TokenProvided",
            "description": "Changing token",
            "token": "newSecretToken456",
            "changeToken": True,
        }

        await upsert_login_method(client, params)

        request = client.update_login_method.await_args.args[0]
        assert request["sourceConfiguration"] == {
            "token": "newSecretToken456",
            "changeToken": True,
        }

    @pytest.mark.asyncio
    async def test_update_sap_sso_ticket(self, client, existing_factory):
        client.get_login_method_details.side_effect = None
        client.get_login_method_details.return_value = existing_factory("SingleSignOn")
        params = {
            "loginMethodKind": "SingleSignOn",
            "sourceType": "Provided",
            "name": "SSO",
            "description": "",
            "ticket": "ticket-1",
        }

        await upsert_login_method(client, params)

        request = client.update_login_method.await_args.args[0]
        assert request["loginMethodType"] == "SingleSignOn"
        assert request["sourceConfiguration"] == {"ticket": "ticket-1", "changeTicket": False}


class TestValidationFailures:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("kind", ["UserCredentials", "OAuth2", "Token", "SingleSignOn"])
    async def test_unsupported_source_makes_no_remote_call(self, client, kind):
        params = {
            "loginMethodKind": kind,
            "sourceType": "InvalidSource",
            "name": "Bad",
            "description": "",
        }

        with pytest.raises(LoginMethodValidationError, match="InvalidSource"):
            await upsert_login_method(client, params)

        client.get_login_method_details.assert_not_called()
        client.list_oauth2_clients.assert_not_called()
        client.create_login_method.assert_not_called()
        client.update_login_method.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_required_field_makes_no_remote_call(self, client):
        params = {"loginMethodKind": "UserCredentials", "name": "BA", "description": "", "username": "u"}

        with pytest.raises(LoginMethodValidationError, match="'username' and 'password'"):
            await upsert_login_method(client, params)

        client.get_login_method_details.assert_not_called()
        client.create_login_method.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_target_field_makes_no_remote_call(self, client):
        params = {
            "loginMethodKind": "Token",
            "name": "T",
            "description": "",
            "targetType": "CustomHeader",
        }

        with pytest.raises(LoginMethodValidationError, match="customHeaderName"):
            await upsert_login_method(client, params)

        client.get_login_method_details.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_login_method_kind(self, client):
        with pytest.raises(KeyError):
            await upsert_login_method(
                client, {"loginMethodKind": "SAML", "name": "x", "description": ""}
            )

    @pytest.mark.asyncio
    async def test_write_failure_propagates(self, client):
        client.create_login_method.side_effect = SimplifierApiError("Creation failed", 400)

        with pytest.raises(SimplifierApiError, match="Creation failed"):
            await upsert_login_method(
                client, {"loginMethodKind": "Token", "name": "T", "description": ""}
            )


class TestOAuth2ClientValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("source_type", ["Default", "Reference"])
    async def test_known_client_passes(self, client, source_type):
        params = {
            "loginMethodKind": "OAuth2",
            "sourceType": source_type,
            "name": "MyOAuth",
            "description": "",
            "oauth2ClientName": "testClient",
        }

        await upsert_login_method(client, params)

        client.list_oauth2_clients.assert_awaited_once()
        client.create_login_method.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_client_fails(self, client):
        params = {
            "loginMethodKind": "OAuth2",
            "sourceType": "Default",
            "name": "MyOAuth",
            "description": "",
            "oauth2ClientName": "nonExistentClient",
        }

        with pytest.raises(LoginMethodValidationError) as exc_info:
            await upsert_login_method(client, params)

        assert "nonExistentClient" in str(exc_info.value)
        assert "infraOIDC, testClient" in str(exc_info.value)
        client.create_login_method.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_client_name_skips_lookup(self, client):
        params = {"loginMethodKind": "OAuth2", "name": "MyOAuth", "description": ""}

        with pytest.raises(LoginMethodValidationError):
            await upsert_login_method(client, params)

        client.list_oauth2_clients.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "extra",
        [
            {"sourceType": "ProfileReference", "profileKey": "myOAuthKey"},
            {
                "sourceType": "UserAttributeReference",
                "userAttributeName": "oauthAttr",
                "userAttributeCategory": "auth",
            },
        ],
    )
    async def test_reference_sources_skip_lookup(self, client, extra):
        params = {"loginMethodKind": "OAuth2", "name": "MyOAuth", "description": "", **extra}

        await upsert_login_method(client, params)

        client.list_oauth2_clients.assert_not_called()
        client.create_login_method.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_empty_client_list(self, client):
        client.list_oauth2_clients.return_value = {"authSettings": []}

        with pytest.raises(LoginMethodValidationError, match=r"\(none\)"):
            await validate_oauth2_client_name(client, "anyClient")


@pytest.mark.asyncio
async def test_find_existing_returns_none_on_error(client):
    assert await find_existing_login_method(client, "missing") is None


@pytest.mark.asyncio
async def test_find_existing_returns_record(client, existing_factory):
    existing = existing_factory("OAuth2")
    client.get_login_method_details.side_effect = None
    client.get_login_method_details.return_value = existing
    assert await find_existing_login_method(client, "ExistingAuth") == existing
