"""
Resolve Current User Use Case

Turns a request's session into the signed-in user's identity.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from travelcraft.libs.result import Error, Result, Return

from travelcraft.app.services.session_context import SessionContext
from travelcraft.app.services.unit_of_work import UnitOfWork
from .dtos import UserInfo

logger = logging.getLogger(__name__)


class ResolveCurrentUserUseCase:
    """
    Business Rules:
    - NO_SESSION: session carries no user_id
    - INVALID_SESSION: user_id no longer matches a user; the dangling
      session is destroyed so it cannot be reused
    - STORE_UNAVAILABLE: lookup failed; callers treat it as unauthenticated
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session: SessionContext) -> Result[UserInfo]:
        if not session.is_authenticated:
            return Return.err(Error("NO_SESSION", "No session provided"))

        try:
            async with self.uow:
                user = await self.uow.users.get_by_id(session.user_id)

                if user is None:
                    logger.warning(f"Session references missing user {session.user_id}")
                    session.mark_destroyed()
                    await session.save(self.uow)
                    await self.uow.commit()
                    return Return.err(Error("INVALID_SESSION", "Invalid session"))

                return Return.ok(UserInfo(**user.public_view()))
        except SQLAlchemyError as exc:
            logger.error(f"User lookup failed: {exc}")
            return Return.err(Error("STORE_UNAVAILABLE", "Session could not be verified"))
