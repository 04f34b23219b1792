from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from travelcraft.api.error import ClientError, ServerError
from travelcraft.app.services.chat_gateway import IChatGateway
from travelcraft.app.use_cases.chat import AskChatUseCase
from travelcraft.depends import get_chat_gateway

router = APIRouter(prefix="/chat", tags=["Chat"])


class ChatRequest(BaseModel):
    message: str = ""
    provider: str = "gemini"


class ChatResponse(BaseModel):
    response: str


@router.post("", status_code=status.HTTP_200_OK, response_model=ChatResponse)
async def chat(request: ChatRequest, gateway: IChatGateway = Depends(get_chat_gateway)):
    """
    Chatbot relay

    Raises:
        - 400 Bad Request: Empty message or unknown provider
        - 502 Bad Gateway: Provider call failed
    """
    result = await AskChatUseCase(gateway).execute(request.message, request.provider)
    if result.is_err():
        error = result.error
        if error.code in ("MESSAGE_REQUIRED", "INVALID_PROVIDER"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == "PROVIDER_ERROR":
            raise ClientError(error, status_code=status.HTTP_502_BAD_GATEWAY)
        raise ServerError(error)
    return result.value
