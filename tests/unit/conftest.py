import pytest
from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

from travelcraft.app.services.session_context import SessionContext
from travelcraft.domain.entities import Session


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.create = AsyncMock(side_effect=lambda user: user)

    uow.sessions = MagicMock()
    uow.sessions.bind_user = AsyncMock(return_value=True)
    uow.sessions.delete_by_id = AsyncMock(return_value=True)

    uow.posts = MagicMock()
    uow.posts.list_by_user_id = AsyncMock(return_value=[])
    uow.posts.get_owned = AsyncMock()
    uow.posts.create = AsyncMock(side_effect=lambda post: post)
    uow.posts.update = AsyncMock(side_effect=lambda post: post)
    uow.posts.delete = AsyncMock()

    uow.contact_messages = MagicMock()
    uow.contact_messages.create = AsyncMock(side_effect=lambda message: message)
    return uow


@pytest.fixture
def anonymous_session():
    now = datetime(2026, 1, 15, 9, 0, 0)
    record = Session(
        id="session-1",
        created_at=now,
        last_accessed_at=now,
        expires_at=now + timedelta(minutes=30),
    )
    return SessionContext(record)
