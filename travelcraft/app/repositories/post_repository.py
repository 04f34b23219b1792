from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from travelcraft.domain.entities import Post


class IPostRepository(ABC):
    """Post repository interface - application layer"""

    @abstractmethod
    async def list_by_user_id(self, user_id: UUID) -> List[Post]:
        """Get all posts of a user, newest first"""
        pass

    @abstractmethod
    async def get_owned(self, post_id: UUID, user_id: UUID) -> Optional[Post]:
        """Get a post only if it belongs to the user"""
        pass

    @abstractmethod
    async def create(self, post: Post) -> Post:
        pass

    @abstractmethod
    async def update(self, post: Post) -> Post:
        pass

    @abstractmethod
    async def delete(self, post: Post) -> None:
        pass
