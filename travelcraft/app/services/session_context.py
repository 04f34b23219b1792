"""
Request-scoped view of the caller's session.

The session middleware builds one ``SessionContext`` per request and hands it
to handlers through a dependency. Handlers never touch the store directly:
they mutate the context and call ``save(uow)`` inside their unit of work.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from travelcraft.app.services.unit_of_work import UnitOfWork
from travelcraft.domain.entities import Session, User

logger = logging.getLogger(__name__)


class SessionContext:
    def __init__(self, record: Session):
        self._record = record
        self._bound_user: Optional[User] = None
        self._destroyed = False

    @property
    def session_id(self) -> str:
        return self._record.id

    @property
    def user_id(self) -> Optional[UUID]:
        return self._record.user_id

    @property
    def user_email(self) -> Optional[str]:
        return self._record.user_email

    @property
    def expires_at(self) -> datetime:
        return self._record.expires_at

    @property
    def is_authenticated(self) -> bool:
        return not self._destroyed and self._record.is_authenticated

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def bind_user(self, user: User) -> None:
        """Anonymous -> Authenticated. Persisted by the next ``save``."""
        self._bound_user = user
        self._record.user_id = user.id
        self._record.user_email = user.email

    def mark_destroyed(self) -> None:
        self._destroyed = True

    async def save(self, uow: UnitOfWork) -> None:
        """
        Write pending changes through the caller's unit of work.

        The caller commits. Destroying a session that is already gone is not
        an error.
        """
        if self._destroyed:
            removed = await uow.sessions.delete_by_id(self.session_id)
            logger.info(f"Session destroyed (existed={removed})")
            return

        if self._bound_user is not None:
            await uow.sessions.bind_user(
                self.session_id, self._bound_user.id, self._bound_user.email
            )
            self._bound_user = None
