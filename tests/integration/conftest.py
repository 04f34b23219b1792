from contextlib import asynccontextmanager
from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from travelcraft.depends import get_unit_of_work
from travelcraft.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from travelcraft.app.services.session_store import SessionStore

COOKIE_NAME = "travelcraft.sid"


class MutableClock:
    """Store clock the tests can move forward"""

    def __init__(self):
        self.now = datetime(2026, 1, 15, 9, 0, 0)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest.fixture
def clock():
    return MutableClock()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def uow_scope(session_factory):
    @asynccontextmanager
    async def scope():
        async with session_factory() as session:
            async with SqlAlchemyUnitOfWork(session) as uow:
                yield uow

    return scope


@pytest.fixture
def session_store(uow_scope, clock):
    return SessionStore(uow_scope, window=timedelta(minutes=30), clock=clock)


@pytest.fixture
def app(session_factory, session_store):
    from travelcraft.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig, session_store=session_store)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def load_session(session_factory):
    """Read a session row straight from the database"""
    from travelcraft.domain.entities import Session

    async def load(session_id):
        async with session_factory() as db:
            return await db.get(Session, session_id)

    return load


@pytest.fixture
def signed_in(client, test_data):
    """Sign a user up through the API and return its public fields"""

    async def sign_up(name: str = "traveller"):
        response = await client.post("/api/auth/signup", json=test_data.user(name))
        assert response.status_code == 201
        return response.json()["user"]

    return sign_up
