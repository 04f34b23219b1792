import logging

from travelcraft.libs.result import Result, Return

from travelcraft.app.services.session_context import SessionContext
from travelcraft.app.services.unit_of_work import UnitOfWork
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Destroys the caller's session record entirely.

    Used by both logout and cleanup-session; deleting an already-deleted
    session succeeds, so repeated calls are safe.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session: SessionContext, message: str = "Logged out successfully"
    ) -> Result[MessageResponse]:
        async with self.uow:
            session.mark_destroyed()
            await session.save(self.uow)
            await self.uow.commit()

        return Return.ok(MessageResponse(message=message))
