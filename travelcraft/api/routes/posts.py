from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from travelcraft.api.error import ClientError, ServerError
from travelcraft.app.services.unit_of_work import UnitOfWork
from travelcraft.app.use_cases.posts import (
    CreatePostCommand,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    PostResponse,
    UpdatePostCommand,
    UpdatePostUseCase,
)
from travelcraft.app.use_cases.auth import MessageResponse
from travelcraft.depends import CurrentUser, get_current_user, get_unit_of_work

router = APIRouter(prefix="/posts", tags=["Posts"])


def _raise_for(error):
    if error.code == "POST_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if error.code == "INVALID_POST":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    raise ServerError(error)


class CreatePostRequest(BaseModel):
    title: str = Field("", description="Trip title")
    description: str = Field("", description="Trip plan description")


class UpdatePostRequest(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=List[PostResponse])
async def list_posts(
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Posts of the signed-in user, newest first"""
    result = await ListPostsUseCase(uow).execute(current_user.id)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PostResponse)
async def create_post(
    request: CreatePostRequest,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a post owned by the signed-in user

    Raises:
        - 400 Bad Request: Title or description missing
    """
    command = CreatePostCommand(title=request.title, description=request.description)
    result = await CreatePostUseCase(uow).execute(current_user.id, command)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.get("/{post_id}", status_code=status.HTTP_200_OK, response_model=PostResponse)
async def get_post(
    post_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetPostUseCase(uow).execute(current_user.id, post_id)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.put("/{post_id}", status_code=status.HTTP_200_OK, response_model=PostResponse)
async def update_post(
    post_id: UUID,
    request: UpdatePostRequest,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = UpdatePostCommand(title=request.title, description=request.description)
    result = await UpdatePostUseCase(uow).execute(current_user.id, post_id, command)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.delete("/{post_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def delete_post(
    post_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeletePostUseCase(uow).execute(current_user.id, post_id)
    if result.is_err():
        _raise_for(result.error)
    return result.value
