"""
Session Store

Owns session records: resolves the id presented by a request (creating a new
anonymous session when needed), slides the rolling expiry and sweeps expired
rows.
"""

import asyncio
import contextlib
import logging
from datetime import datetime, timedelta
from typing import AsyncContextManager, Callable, Optional

from travelcraft.app.services.unit_of_work import UnitOfWork
from travelcraft.domain.base import utcnow
from travelcraft.domain.entities import Session

logger = logging.getLogger(__name__)

UnitOfWorkScope = Callable[[], AsyncContextManager[UnitOfWork]]


class SessionStore:
    """
    Session store backed by the ``sessions`` table.

    Every operation runs in its own short unit of work and commits before
    returning, so request handlers never hold the store's transaction open.
    """

    def __init__(
        self,
        uow_scope: UnitOfWorkScope,
        window: timedelta = timedelta(minutes=30),
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow_scope = uow_scope
        self.window = window
        self.clock = clock
        self._sweep_task: Optional[asyncio.Task] = None

    async def resolve(self, session_id: Optional[str]) -> Session:
        """
        Load and touch the session for ``session_id``.

        A missing, unknown or expired id yields a brand-new anonymous session.
        Store failures propagate to the caller.
        """
        now = self.clock()
        async with self.uow_scope() as uow:
            record = None
            if session_id:
                record = await uow.sessions.get_by_id(session_id)
                if record is not None and record.is_expired(now):
                    await uow.sessions.delete_by_id(record.id)
                    record = None

            if record is None:
                record = Session(created_at=now, last_accessed_at=now, expires_at=now + self.window)
                record = await uow.sessions.create(record)
                logger.debug("Created anonymous session")
            else:
                record.touch(now, self.window)
                record = await uow.sessions.update(record)

            await uow.commit()
            return record

    async def destroy(self, session_id: str) -> bool:
        async with self.uow_scope() as uow:
            removed = await uow.sessions.delete_by_id(session_id)
            await uow.commit()
            return removed

    async def purge_expired(self) -> int:
        """Remove all expired sessions. Return count of removed sessions."""
        async with self.uow_scope() as uow:
            count = await uow.sessions.delete_expired(self.clock())
            await uow.commit()
        if count:
            logger.info(f"Purged {count} expired session(s)")
        return count

    def start_sweep(self, interval_seconds: float) -> None:
        """Start the periodic expiry sweep."""
        if self._sweep_task is not None and not self._sweep_task.done():
            return
        self._sweep_task = asyncio.create_task(self._sweep_loop(interval_seconds))

    async def stop_sweep(self) -> None:
        if self._sweep_task is not None:
            self._sweep_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._sweep_task
            self._sweep_task = None

    async def _sweep_loop(self, interval_seconds: float) -> None:
        while True:
            await asyncio.sleep(interval_seconds)
            try:
                await self.purge_expired()
            except Exception:
                logger.exception("Session sweep failed")
