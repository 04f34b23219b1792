from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from travelcraft.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: str) -> Optional[Session]:
        """Get session by ID"""
        pass

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def update(self, session: Session) -> Session:
        """Update existing session"""
        pass

    @abstractmethod
    async def bind_user(self, session_id: str, user_id: UUID, user_email: str) -> bool:
        """Attach a user to a session. Returns True if the session existed."""
        pass

    @abstractmethod
    async def delete_by_id(self, session_id: str) -> bool:
        """Delete a session. Returns True if a row was removed."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete every session whose expiry has passed. Returns count."""
        pass
