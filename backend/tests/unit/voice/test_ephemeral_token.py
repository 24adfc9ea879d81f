"""Unit tests for EphemeralTokenClient using httpx.MockTransport"""

import json

import httpx
import pytest

from shopassist.domain.ai import (
    ProviderAuthError,
    ProviderInvalidResponseError,
    ProviderServiceError,
    ProviderTimeoutError,
)
from shopassist.voice import EphemeralTokenClient

BASE_URL = "https://api.openai.com/v1"


def _client(handler, api_key="sk-test"):
    http = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    return EphemeralTokenClient(api_key=api_key, model="gpt-realtime-mini", client=http)


class TestCreateToken:
    @pytest.mark.asyncio
    async def test_posts_session_and_returns_secret(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"value": "ek_abc", "expires_at": 1760000600})

        data = await _client(handler).create()

        assert data["value"] == "ek_abc"
        assert seen["url"] == "https://api.openai.com/v1/realtime/client_secrets"
        assert seen["auth"] == "Bearer sk-test"
        assert seen["body"] == {"session": {"type": "realtime", "model": "gpt-realtime-mini"}}

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        def handler(request):
            raise AssertionError("no request expected")

        with pytest.raises(ProviderAuthError):
            await _client(handler, api_key=None).create()

    @pytest.mark.asyncio
    async def test_rejected_credentials(self):
        with pytest.raises(ProviderAuthError):
            await _client(lambda request: httpx.Response(401, text="invalid key")).create()

    @pytest.mark.asyncio
    async def test_server_error(self):
        with pytest.raises(ProviderServiceError):
            await _client(lambda request: httpx.Response(500, text="oops")).create()

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(ProviderTimeoutError):
            await _client(handler).create()

    @pytest.mark.asyncio
    async def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(ProviderServiceError):
            await _client(handler).create()

    @pytest.mark.asyncio
    async def test_response_without_value(self):
        with pytest.raises(ProviderInvalidResponseError):
            await _client(lambda request: httpx.Response(200, json={"expires_at": 1})).create()
