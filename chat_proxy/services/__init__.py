"""
Service layer for the chat proxy.

Holds the outbound call to the chatbot backend so routes stay limited to
HTTP concerns (reading the request, shaping the response).
"""

from .chat_service import forward_chat_payload

__all__ = [
    "forward_chat_payload",
]
