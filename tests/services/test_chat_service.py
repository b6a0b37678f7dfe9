"""
Tests for the chat relay service (outbound POST to the chatbot backend).

The backend is simulated with httpx.MockTransport so the exact outbound
request can be inspected.
"""

import json
from unittest.mock import patch

import httpx
import pytest

from chat_proxy.config import settings
from chat_proxy.services.chat_service import forward_chat_payload


def make_client(handler):
    """Build an AsyncClient whose requests are answered by handler."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestForwardChatPayload:
    """Tests for forward_chat_payload function."""

    @pytest.mark.asyncio
    async def test_posts_json_to_configured_backend(self):
        """
        Should:
        - Use POST
        - Target settings.CHATBOT_BACKEND_URL
        - Send Content-Type: application/json
        - Send the payload unchanged
        """
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"reply": "pong"})

        payload = {"message": "ping", "history": [], "meta": {"lang": "en"}}

        async with make_client(handler) as client:
            result = await forward_chat_payload(payload, http_client=client)

        assert result == {"reply": "pong"}
        assert len(seen) == 1
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == settings.CHATBOT_BACKEND_URL
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == payload

    @pytest.mark.asyncio
    async def test_backend_url_override(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json={})

        async with make_client(handler) as client:
            await forward_chat_payload(
                {"message": "hi"},
                http_client=client,
                backend_url="http://chatbot.internal:9000/api/chat",
            )

        assert seen == ["http://chatbot.internal:9000/api/chat"]

    @pytest.mark.asyncio
    async def test_error_status_with_json_body_is_returned(self):
        """Backend status codes are not inspected."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"error": "boom"})

        async with make_client(handler) as client:
            result = await forward_chat_payload({"message": "hi"}, http_client=client)

        assert result == {"error": "boom"}

    @pytest.mark.asyncio
    async def test_non_json_reply_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="plain text reply")

        async with make_client(handler) as client:
            with pytest.raises(ValueError):
                await forward_chat_payload({"message": "hi"}, http_client=client)

    @pytest.mark.asyncio
    async def test_connection_error_propagates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(httpx.ConnectError):
                await forward_chat_payload({"message": "hi"}, http_client=client)

    @pytest.mark.asyncio
    async def test_single_attempt_per_call(self):
        """No retries on failure."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("Connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(httpx.ConnectError):
                await forward_chat_payload({"message": "hi"}, http_client=client)

        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_default_client_sets_no_explicit_timeout(self):
        """The short-lived client relies on httpx's own default timeout."""
        created = []
        real_client = httpx.AsyncClient

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"reply": "pong"})

        def factory(*args, **kwargs):
            created.append(kwargs)
            return real_client(*args, transport=httpx.MockTransport(handler), **kwargs)

        with patch("chat_proxy.services.chat_service.httpx.AsyncClient", side_effect=factory):
            result = await forward_chat_payload({"message": "hi"})

        assert result == {"reply": "pong"}
        assert len(created) == 1
        assert "timeout" not in created[0]

    @pytest.mark.asyncio
    async def test_slow_backend_timeout_propagates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        async with make_client(handler) as client:
            with pytest.raises(httpx.TimeoutException):
                await forward_chat_payload({"message": "hi"}, http_client=client)
