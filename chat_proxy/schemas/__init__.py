"""
Pydantic schemas for the chat proxy endpoints.
"""

from .chat import ChatErrorResponse
from .health import HealthResponse

__all__ = [
    "ChatErrorResponse",
    "HealthResponse",
]
