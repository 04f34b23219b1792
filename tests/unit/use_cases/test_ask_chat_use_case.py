from unittest.mock import AsyncMock, MagicMock

import pytest

from travelcraft.app.services.chat_gateway import ChatProviderError
from travelcraft.app.use_cases.chat import AskChatUseCase


@pytest.fixture
def gateway():
    gateway = MagicMock()
    gateway.providers = ("gemini", "deepseek", "venice")
    gateway.ask = AsyncMock(return_value="Try the night market.")
    return gateway


@pytest.mark.asyncio
async def test_ask_default_provider(gateway):
    result = await AskChatUseCase(gateway).execute("Where to eat in Taipei?")

    assert result.is_ok()
    assert result.value == {"response": "Try the night market."}
    gateway.ask.assert_called_once_with("gemini", "Where to eat in Taipei?")


@pytest.mark.asyncio
async def test_ask_invalid_provider(gateway):
    result = await AskChatUseCase(gateway).execute("Hi", provider="other")

    assert result.is_err()
    assert result.error.code == "INVALID_PROVIDER"
    gateway.ask.assert_not_called()


@pytest.mark.asyncio
async def test_ask_empty_message(gateway):
    result = await AskChatUseCase(gateway).execute("")

    assert result.is_err()
    assert result.error.code == "MESSAGE_REQUIRED"


@pytest.mark.asyncio
async def test_ask_provider_failure(gateway):
    gateway.ask.side_effect = ChatProviderError("DeepSeek API error: 500")

    result = await AskChatUseCase(gateway).execute("Hi", provider="deepseek")

    assert result.is_err()
    assert result.error.code == "PROVIDER_ERROR"
