"""
Simplifier platform credentials.

Base URL of the Simplifier instance plus the SimplifierToken used to
authenticate REST calls.
"""

from .base import CredentialSpec

LOGIN_METHOD_TOOLS = [
    "loginmethod_update",
]

SIMPLIFIER_CREDENTIALS = {
    "simplifier_base_url": CredentialSpec(
        env_var="SIMPLIFIER_BASE_URL",
        tools=LOGIN_METHOD_TOOLS,
        required=True,
        startup_required=True,
        is_url=True,
        description="Base URL of the Simplifier instance (e.g. https://myinstance.simplifier.cloud)",
    ),
    "simplifier_token": CredentialSpec(
        env_var="SIMPLIFIER_TOKEN",
        tools=LOGIN_METHOD_TOOLS,
        required=True,
        startup_required=False,
        help_url="https://community.simplifier.io/doc/current-release/",
        description=(
            "SimplifierToken of the acting user. The token behaves like a session "
            "key and must be refreshed daily."
        ),
    ),
}
