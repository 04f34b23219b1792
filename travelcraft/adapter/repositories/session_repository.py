from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import delete, select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from travelcraft.app.repositories.session_repository import ISessionRepository
from travelcraft.domain.entities import Session


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, session_id: str) -> Optional[Session]:
        """Get session by ID"""
        stmt = select(Session).where(Session.id == session_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def update(self, session_obj: Session) -> Session:
        """Update existing session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def bind_user(self, session_id: str, user_id: UUID, user_email: str) -> bool:
        """
        Attach a user to a session with a single UPDATE.

        Concurrent requests on the same session resolve as last-write-wins.
        """
        stmt = (
            update(Session)
            .where(Session.id == session_id)
            .values(user_id=user_id, user_email=user_email)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_id(self, session_id: str) -> bool:
        """Delete a session by ID"""
        stmt = delete(Session).where(Session.id == session_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_expired(self, now: datetime) -> int:
        """Delete all sessions whose expiry has passed"""
        stmt = delete(Session).where(Session.expires_at <= now)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
