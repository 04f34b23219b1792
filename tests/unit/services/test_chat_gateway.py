import json

import httpx
import pytest

from travelcraft.adapter.services.chat_gateway import HttpChatGateway
from travelcraft.app.services.chat_gateway import ChatProviderError


def gateway_with(handler):
    return HttpChatGateway(
        gemini_api_key="g-key",
        deepseek_api_key="d-key",
        venice_api_key="v-key",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_venice_request_shape():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"choices": [{"message": {"content": "Bring a rain jacket."}}]})

    answer = await gateway_with(handler).ask("venice", "Weather in Bergen?")

    assert answer == "Bring a rain jacket."
    request = seen[0]
    assert str(request.url) == "https://api.venice.ai/api/v1/chat/completions"
    assert request.headers["authorization"] == "Bearer v-key"
    body = json.loads(request.content)
    assert body["model"] == "llama-3.3-70b"
    assert body["max_tokens"] == 150
    assert body["temperature"] == 0.7
    assert body["messages"][0]["role"] == "system"


@pytest.mark.asyncio
async def test_gemini_unexpected_body():
    gateway = gateway_with(lambda request: httpx.Response(200, json={"candidates": []}))

    with pytest.raises(ChatProviderError, match="Invalid response from Gemini API"):
        await gateway.ask("gemini", "Hi")


@pytest.mark.asyncio
async def test_provider_unreachable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ChatProviderError, match="unreachable"):
        await gateway_with(handler).ask("deepseek", "Hi")


@pytest.mark.asyncio
async def test_provider_error_status():
    gateway = gateway_with(lambda request: httpx.Response(429))

    with pytest.raises(ChatProviderError, match="DeepSeek API error: 429"):
        await gateway.ask("deepseek", "Hi")


@pytest.mark.asyncio
async def test_non_json_success_body():
    gateway = gateway_with(lambda request: httpx.Response(200, text="<html>Gateway timeout</html>"))

    with pytest.raises(ChatProviderError, match="Invalid response from Venice AI API"):
        await gateway.ask("venice", "Hi")
