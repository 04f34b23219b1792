"""
Trip post use cases.

Every operation is scoped to the owner: a post belonging to someone else is
reported exactly like a post that does not exist.
"""

from typing import List
from uuid import UUID

from travelcraft.libs.result import Error, Result, Return

from travelcraft.app.services.unit_of_work import UnitOfWork
from travelcraft.domain.entities import Post
from .dtos import CreatePostCommand, PostResponse, UpdatePostCommand

POST_NOT_FOUND = Error("POST_NOT_FOUND", "Post not found or not owned by user")


class ListPostsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[List[PostResponse]]:
        async with self.uow:
            posts = await self.uow.posts.list_by_user_id(user_id)
            return Return.ok([PostResponse.from_entity(p) for p in posts])


class CreatePostUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, command: CreatePostCommand) -> Result[PostResponse]:
        if not command.title or not command.description:
            return Return.err(
                Error("INVALID_POST", "Title and description are required")
            )

        async with self.uow:
            post = Post(title=command.title, description=command.description, user_id=user_id)
            post = await self.uow.posts.create(post)
            await self.uow.commit()
            return Return.ok(PostResponse.from_entity(post))


class GetPostUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, post_id: UUID) -> Result[PostResponse]:
        async with self.uow:
            post = await self.uow.posts.get_owned(post_id, user_id)
            if post is None:
                return Return.err(POST_NOT_FOUND)
            return Return.ok(PostResponse.from_entity(post))


class UpdatePostUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, post_id: UUID, command: UpdatePostCommand
    ) -> Result[PostResponse]:
        async with self.uow:
            post = await self.uow.posts.get_owned(post_id, user_id)
            if post is None:
                return Return.err(POST_NOT_FOUND)

            post.title = command.title or post.title
            post.description = command.description or post.description
            post = await self.uow.posts.update(post)
            await self.uow.commit()
            return Return.ok(PostResponse.from_entity(post))


class DeletePostUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, post_id: UUID) -> Result[dict]:
        async with self.uow:
            post = await self.uow.posts.get_owned(post_id, user_id)
            if post is None:
                return Return.err(POST_NOT_FOUND)

            await self.uow.posts.delete(post)
            await self.uow.commit()
            return Return.ok({"message": "Post deleted successfully"})
