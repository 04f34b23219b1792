"""
HTTP gateway to the hosted chat providers (Gemini, DeepSeek, Venice).

Only the request shapes are owned here; answers are reduced to their text.
"""

import logging
from typing import Optional

import httpx

from travelcraft.app.services.chat_gateway import ChatProviderError, IChatGateway

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful travel assistant for a trip planning website called "
    "Travel Craft. Answer questions in a friendly and helpful manner."
)
GEMINI_PROMPT = (
    "You are a helpful travel assistant for a trip planning website called "
    "Travel Craft. Answer the user's question in a friendly and helpful manner. "
    "User question: {message}"
)
MAX_TOKENS = 150
TEMPERATURE = 0.7

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
DEEPSEEK_URL = "https://api.deepseek.com/v1/chat/completions"
VENICE_URL = "https://api.venice.ai/api/v1/chat/completions"


class HttpChatGateway(IChatGateway):
    providers = ("gemini", "deepseek", "venice")

    def __init__(
        self,
        gemini_api_key: str,
        deepseek_api_key: str,
        venice_api_key: str,
        gemini_model: str = "gemini-1.5-flash",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.gemini_api_key = gemini_api_key
        self.deepseek_api_key = deepseek_api_key
        self.venice_api_key = venice_api_key
        self.gemini_model = gemini_model
        self.timeout = timeout
        self.transport = transport

    async def ask(self, provider: str, message: str) -> str:
        if provider == "gemini":
            return await self._ask_gemini(message)
        if provider == "deepseek":
            return await self._ask_openai_style(
                "DeepSeek", DEEPSEEK_URL, self.deepseek_api_key, "deepseek-chat", message
            )
        if provider == "venice":
            return await self._ask_openai_style(
                "Venice AI", VENICE_URL, self.venice_api_key, "llama-3.3-70b", message
            )
        raise ChatProviderError(f"Unknown provider: {provider}")

    async def _post(self, label: str, url: str, **kwargs) -> dict:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(url, **kwargs)
            except httpx.HTTPError as exc:
                raise ChatProviderError(f"{label} API unreachable: {exc}") from exc

        if response.status_code >= 400:
            raise ChatProviderError(f"{label} API error: {response.status_code}")
        try:
            return response.json()
        except ValueError:
            raise ChatProviderError(f"Invalid response from {label} API")

    async def _ask_gemini(self, message: str) -> str:
        payload = {
            "contents": [{"parts": [{"text": GEMINI_PROMPT.format(message=message)}]}],
            "generationConfig": {"temperature": TEMPERATURE, "maxOutputTokens": MAX_TOKENS},
        }
        data = await self._post(
            "Gemini",
            GEMINI_URL.format(model=self.gemini_model),
            params={"key": self.gemini_api_key},
            json=payload,
        )
        try:
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            raise ChatProviderError("Invalid response from Gemini API")

    async def _ask_openai_style(
        self, label: str, url: str, api_key: str, model: str, message: str
    ) -> str:
        payload = {
            "model": model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": message},
            ],
            "max_tokens": MAX_TOKENS,
            "temperature": TEMPERATURE,
        }
        data = await self._post(
            label,
            url,
            headers={"Authorization": f"Bearer {api_key}"},
            json=payload,
        )
        try:
            return data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            raise ChatProviderError(f"Invalid response from {label} API")
