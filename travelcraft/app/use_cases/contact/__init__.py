from .submit_contact_message_use_case import ContactMessageCommand, SubmitContactMessageUseCase

__all__ = ["ContactMessageCommand", "SubmitContactMessageUseCase"]
