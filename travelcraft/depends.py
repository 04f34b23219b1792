from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import Depends, Request, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from travelcraft.adapter.services.chat_gateway import HttpChatGateway
from travelcraft.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from travelcraft.api.error import ClientError
from travelcraft.app.services.chat_gateway import IChatGateway
from travelcraft.app.services.session_context import SessionContext
from travelcraft.app.services.unit_of_work import UnitOfWork
from travelcraft.app.use_cases.auth import ResolveCurrentUserUseCase

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


class CurrentUser(BaseModel):
    """Identity attached to authenticated requests"""

    id: UUID
    email: str
    name: str


@asynccontextmanager
async def unit_of_work_scope():
    """Standalone unit of work for work done outside a route, e.g. the session store"""
    async with AsyncSessionLocal() as session:
        async with SqlAlchemyUnitOfWork(session) as uow:
            yield uow


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_session_context(request: Request) -> SessionContext:
    """The SessionContext built by SessionMiddleware for this request"""
    return request.state.session_context


def get_chat_gateway() -> IChatGateway:
    return HttpChatGateway(
        gemini_api_key=ApplicationConfig.GEMINI_API_KEY,
        deepseek_api_key=ApplicationConfig.DEEPSEEK_API_KEY,
        venice_api_key=ApplicationConfig.VENICE_API_KEY,
        gemini_model=ApplicationConfig.GEMINI_MODEL,
        timeout=ApplicationConfig.CHAT_TIMEOUT_SECONDS,
    )


async def get_current_user(
    session: SessionContext = Depends(get_session_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> CurrentUser:
    """
    Dependency requiring a signed-in session.

    Returns:
        CurrentUser with id, email and name

    Raises:
        ClientError: 401 when the session is anonymous, points to a user that
        no longer exists (the session is destroyed), or cannot be verified
    """
    use_case = ResolveCurrentUserUseCase(uow)
    result = await use_case.execute(session)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)

    user = result.value
    return CurrentUser(id=UUID(user.id), email=user.email, name=user.name)
