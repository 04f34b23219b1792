"""
Post Use Case DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from travelcraft.domain.entities import Post


class CreatePostCommand(BaseModel):
    title: str
    description: str


class UpdatePostCommand(BaseModel):
    """Fields left empty keep their current value"""

    title: Optional[str] = None
    description: Optional[str] = None


class PostResponse(BaseModel):
    id: str
    title: str
    description: str
    user_id: str
    created_at: datetime

    @classmethod
    def from_entity(cls, post: Post) -> "PostResponse":
        return cls(
            id=str(post.id),
            title=post.title,
            description=post.description,
            user_id=str(post.user_id),
            created_at=post.created_at,
        )
