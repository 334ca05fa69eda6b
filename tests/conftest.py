"""Shared fixtures for Simplifier Tools tests."""

from unittest.mock import AsyncMock

import pytest
from fastmcp import FastMCP

from simplifier_tools.credentials import CredentialManager


@pytest.fixture
def mcp():
    """Create a FastMCP server for testing."""
    return FastMCP("test-simplifier")


@pytest.fixture
def mock_credentials():
    return CredentialManager.for_testing(
        {
            "simplifier_base_url": "https://simplifier.test",
            "simplifier_token": "test-token",
        }
    )


@pytest.fixture
def mock_client():
    """SimplifierClient double: every login method lookup fails as 'not found'."""
    client = AsyncMock()
    client.get_login_method_details.side_effect = Exception("Not found")
    client.create_login_method.return_value = "Created"
    client.update_login_method.return_value = "Updated"
    client.list_oauth2_clients.return_value = {"authSettings": []}
    return client
