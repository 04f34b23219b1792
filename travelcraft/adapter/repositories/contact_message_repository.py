from sqlmodel.ext.asyncio.session import AsyncSession

from travelcraft.app.repositories.contact_message_repository import IContactMessageRepository
from travelcraft.domain.entities import ContactMessage


class ContactMessageRepository(IContactMessageRepository):
    """Contact message repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, message: ContactMessage) -> ContactMessage:
        self.session.add(message)
        await self.session.flush()
        await self.session.refresh(message)
        return message
