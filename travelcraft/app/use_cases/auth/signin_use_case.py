"""
Signin Use Case

Verifies credentials and binds the caller's session to the user.
"""

import logging

import bcrypt
from travelcraft.libs.result import Error, Result, Return

from travelcraft.app.services.session_context import SessionContext
from travelcraft.app.services.unit_of_work import UnitOfWork
from .dtos import AuthResponse, SigninCommand, UserInfo

logger = logging.getLogger(__name__)


class SigninUseCase:
    """
    Use case for user signin.

    Business Rules:
    - Password verified against the stored bcrypt hash
    - On failure the session stays anonymous
    - On success the session gains user_id and user_email
    - Failure messages tell an unknown email apart from a wrong password
      (kept as-is, see DESIGN.md open questions)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: SigninCommand, session: SessionContext
    ) -> Result[AuthResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(command.email)

            if user is None:
                logger.info("Signin failed: no user for email")
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid credentials (email)")
                )

            password_valid = bcrypt.checkpw(
                command.password.encode(), user.password_hash.encode()
            )
            if not password_valid:
                logger.info(f"Signin failed: password mismatch for user {user.id}")
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid credentials (password)")
                )

            session.bind_user(user)
            await session.save(self.uow)
            await self.uow.commit()

            logger.info(f"User signed in: {user.id}")
            return Return.ok(
                AuthResponse(
                    message="Sign In successful",
                    user=UserInfo(**user.public_view()),
                )
            )
