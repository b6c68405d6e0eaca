"""
UMission - Test Configuration and Fixtures
"""
import os
from datetime import date, timedelta
from typing import AsyncGenerator

import pytest
from faker import Faker
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Set testing environment before the settings object is created
os.environ.setdefault("APP_SECRET_KEY", "test-secret-key-for-testing-only")
os.environ.setdefault("APP_DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("APP_CORS_ORIGINS", '["http://test"]')
os.environ["APP_ANTHROPIC_API_KEY"] = ""

from umission.application import application
from umission.api.auth.service import create_access_refresh_tokens
from umission.api.events import service as event_service
from umission.api.events.models import EventCategories
from umission.api.events.schemas import EventCreate
from umission.api.users import service as user_service
from umission.api.users.models import UserRoles, Users
from umission.db.base import AbstractSQLModel
from umission.db.core import get_session

fake = Faker()


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Fresh in-memory database for each test"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(AbstractSQLModel.metadata.create_all)

    session_factory = async_sessionmaker(
        bind=engine, autoflush=False, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the test database"""

    async def override_get_session():
        yield db_session

    application.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    application.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session: AsyncSession):
    async def _make_user(role: UserRoles = UserRoles.volunteer, **kwargs) -> Users:
        return await user_service.create_user(
            db_session,
            full_name=kwargs.get("full_name", fake.name()),
            email=kwargs.get("email", f"{fake.unique.user_name()}@siswa.um.edu.my"),
            password=kwargs.get("password", "password123"),
            role=role,
        )

    return _make_user


@pytest.fixture
async def organizer(make_user) -> Users:
    return await make_user(UserRoles.organizer, full_name="Kelab Sukarelawan")


@pytest.fixture
async def volunteer(make_user) -> Users:
    return await make_user(UserRoles.volunteer, full_name="Aisyah Rahman")


@pytest.fixture
def make_event(db_session: AsyncSession, organizer: Users):
    async def _make_event(
        title: str = "Beach Cleanup",
        max_volunteers: int = 5,
        location: str = "Tasik Varsiti",
        category: EventCategories = EventCategories.environment,
        **kwargs,
    ):
        return await event_service.create_event(
            db_session,
            EventCreate(
                title=title,
                date=kwargs.get("date", date.today() + timedelta(days=7)),
                location=location,
                category=category,
                max_volunteers=max_volunteers,
                description=kwargs.get("description", "Help keep the campus clean"),
                tasks=kwargs.get("tasks", "Collect litter"),
                image_url=kwargs.get("image_url"),
            ),
            organizer=kwargs.get("organizer", organizer),
        )

    return _make_event


def auth_headers_for(user: Users) -> dict:
    token = create_access_refresh_tokens(user)
    return {"Authorization": f"Bearer {token.access_token}"}


@pytest.fixture
def volunteer_headers(volunteer: Users) -> dict:
    return auth_headers_for(volunteer)


@pytest.fixture
def organizer_headers(organizer: Users) -> dict:
    return auth_headers_for(organizer)


@pytest.fixture
def auth_headers():
    return auth_headers_for
