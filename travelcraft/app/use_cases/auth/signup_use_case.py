import logging

import bcrypt
from travelcraft.libs.result import Error, Result, Return

from travelcraft.app.services.session_context import SessionContext
from travelcraft.app.services.unit_of_work import UnitOfWork
from travelcraft.domain.entities import User
from .dtos import AuthResponse, SignupCommand, UserInfo

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Business Logic:
    1. Reject an email that is already registered
    2. Hash password with bcrypt cost factor 12
    3. Create the User
    4. Bind the caller's session to the new user (Anonymous -> Authenticated)
    5. Commit user and session binding atomically
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: SignupCommand, session: SessionContext
    ) -> Result[AuthResponse]:
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(Error("EMAIL_ALREADY_EXISTS", "User already exists"))

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(12)
            )

            user = User(
                name=command.name,
                email=command.email,
                password_hash=password_hash.decode("utf-8"),
            )
            user = await self.uow.users.create(user)

            session.bind_user(user)
            await session.save(self.uow)

            await self.uow.commit()

            logger.info(f"User signed up: {user.id}")
            return Return.ok(
                AuthResponse(
                    message="User Sign Up successful",
                    user=UserInfo(**user.public_view()),
                )
            )
