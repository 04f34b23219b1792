import logging

from pydantic import BaseModel
from travelcraft.libs.result import Error, Result, Return

from travelcraft.app.services.unit_of_work import UnitOfWork
from travelcraft.domain.entities import ContactMessage

logger = logging.getLogger(__name__)


class ContactMessageCommand(BaseModel):
    name: str
    email: str
    subject: str
    message: str


class SubmitContactMessageUseCase:
    """Stores a message from the contact form. All fields are required."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: ContactMessageCommand) -> Result[dict]:
        if not all([command.name, command.email, command.subject, command.message]):
            return Return.err(Error("MISSING_FIELDS", "All fields are required"))

        async with self.uow:
            stored = await self.uow.contact_messages.create(
                ContactMessage(**command.model_dump())
            )
            await self.uow.commit()

        logger.info(f"Contact message stored: {stored.id}")
        return Return.ok({"message": "Message sent successfully!"})
