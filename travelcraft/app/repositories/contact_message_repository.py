from abc import ABC, abstractmethod

from travelcraft.domain.entities import ContactMessage


class IContactMessageRepository(ABC):
    """Contact message repository interface - application layer"""

    @abstractmethod
    async def create(self, message: ContactMessage) -> ContactMessage:
        """Store a new contact message"""
        pass
