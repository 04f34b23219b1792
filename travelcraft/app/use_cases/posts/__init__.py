from .post_use_cases import (
    ListPostsUseCase,
    CreatePostUseCase,
    GetPostUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
)
from .dtos import CreatePostCommand, UpdatePostCommand, PostResponse

__all__ = [
    "ListPostsUseCase",
    "CreatePostUseCase",
    "GetPostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    "CreatePostCommand",
    "UpdatePostCommand",
    "PostResponse",
]
