import logging

from travelcraft.libs.result import Error, Result, Return

from travelcraft.app.services.chat_gateway import ChatProviderError, IChatGateway

logger = logging.getLogger(__name__)


class AskChatUseCase:
    """
    Relays a chatbot message to the chosen LLM provider.

    Errors:
    - MESSAGE_REQUIRED: empty message
    - INVALID_PROVIDER: provider not supported by the gateway
    - PROVIDER_ERROR: upstream call failed or returned an unexpected body
    """

    def __init__(self, gateway: IChatGateway):
        self.gateway = gateway

    async def execute(self, message: str, provider: str = "gemini") -> Result[dict]:
        if not message:
            return Return.err(Error("MESSAGE_REQUIRED", "Message is required"))
        if provider not in self.gateway.providers:
            return Return.err(Error("INVALID_PROVIDER", "Invalid provider"))

        try:
            answer = await self.gateway.ask(provider, message)
        except ChatProviderError as exc:
            logger.error(f"Chat provider {provider} failed: {exc}")
            return Return.err(Error("PROVIDER_ERROR", str(exc)))

        return Return.ok({"response": answer})
