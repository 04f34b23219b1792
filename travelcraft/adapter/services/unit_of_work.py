from sqlmodel.ext.asyncio.session import AsyncSession

from travelcraft.adapter.repositories.contact_message_repository import ContactMessageRepository
from travelcraft.adapter.repositories.post_repository import PostRepository
from travelcraft.adapter.repositories.session_repository import SessionRepository
from travelcraft.adapter.repositories.user_repository import UserRepository
from travelcraft.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.posts = PostRepository(self.session)
        self.contact_messages = ContactMessageRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
