from .ask_chat_use_case import AskChatUseCase

__all__ = ["AskChatUseCase"]
