"""
Chat relay service.

Sends a chat payload to the chatbot backend and hands back its decoded JSON
reply. One attempt per call: no retries, no explicit timeout. Every error
propagates to the caller.

httpx applies its default 5 second timeout, so a chatbot reply slower than
that raises httpx.TimeoutException and the route answers with the generic 500.
"""

import logging
from typing import Any, Optional

import httpx

from chat_proxy.config import settings
from chat_proxy.utils.constants import FORWARD_HEADERS

logger = logging.getLogger(__name__)


async def forward_chat_payload(
    payload: Any,
    http_client: Optional[httpx.AsyncClient] = None,
    backend_url: Optional[str] = None,
) -> Any:
    """
    POST a JSON payload to the chatbot backend and return its JSON reply.

    The payload is forwarded as-is. The backend's status code is not
    inspected: a 4xx/5xx reply with a JSON body is returned like any other.

    Args:
        payload: Decoded JSON document from the inbound request
        http_client: Optional client to send through; a short-lived one is
            opened when omitted
        backend_url: Override for settings.CHATBOT_BACKEND_URL

    Returns:
        The decoded JSON body of the backend response

    Raises:
        httpx.HTTPError: If the backend cannot be reached
        ValueError: If the backend reply is not valid JSON
    """
    url = backend_url or settings.CHATBOT_BACKEND_URL

    if http_client is None:
        async with httpx.AsyncClient() as client:
            response = await client.post(url, json=payload, headers=FORWARD_HEADERS)
    else:
        response = await http_client.post(url, json=payload, headers=FORWARD_HEADERS)

    logger.info(f"Chatbot backend {url} answered with status {response.status_code}")

    return response.json()
