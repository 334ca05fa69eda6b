"""
Utility functions for Simplifier Tools.
"""

from .api_handler import SimplifierApiError, handle_api_response
from .logging import configure_logging

__all__ = [
    "SimplifierApiError",
    "handle_api_response",
    "configure_logging",
]
