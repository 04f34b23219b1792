from abc import ABC, abstractmethod

from travelcraft.app.repositories.contact_message_repository import IContactMessageRepository
from travelcraft.app.repositories.post_repository import IPostRepository
from travelcraft.app.repositories.session_repository import ISessionRepository
from travelcraft.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    sessions: ISessionRepository
    posts: IPostRepository
    contact_messages: IContactMessageRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
