from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from travelcraft.app.repositories.post_repository import IPostRepository
from travelcraft.domain.entities import Post


class PostRepository(IPostRepository):
    """Post repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_user_id(self, user_id: UUID) -> List[Post]:
        stmt = (
            select(Post)
            .where(Post.user_id == user_id)
            .order_by(Post.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_owned(self, post_id: UUID, user_id: UUID) -> Optional[Post]:
        stmt = select(Post).where(Post.id == post_id, Post.user_id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, post: Post) -> Post:
        self.session.add(post)
        await self.session.flush()
        await self.session.refresh(post)
        return post

    async def update(self, post: Post) -> Post:
        self.session.add(post)
        await self.session.flush()
        await self.session.refresh(post)
        return post

    async def delete(self, post: Post) -> None:
        await self.session.delete(post)
        await self.session.flush()
