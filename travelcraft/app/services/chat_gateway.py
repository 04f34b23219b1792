from abc import ABC, abstractmethod


class ChatProviderError(Exception):
    """Raised when an upstream LLM provider fails or answers unexpectedly"""


class IChatGateway(ABC):
    """Relays a single travel question to a hosted LLM provider"""

    providers: tuple

    @abstractmethod
    async def ask(self, provider: str, message: str) -> str:
        """Return the provider's answer text or raise ChatProviderError"""
        pass
