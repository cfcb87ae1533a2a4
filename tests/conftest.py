"""
Hostel Desk - test configuration and fixtures.

Every test gets its own in-memory database. Requests run through the real
application over an ASGI transport, each on a fresh session, exactly as
they would in production.
"""
import os
from dataclasses import dataclass, field
from typing import AsyncGenerator, Awaitable, Callable, Dict, Optional

import pytest
from faker import Faker
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Set testing environment before the app reads its settings
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET_KEY"] = "test-jwt-secret-key-for-testing"
os.environ["PASSWORD_BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LOG_FORMAT"] = "console"

from app.db.base import Base, import_models  # noqa: E402
from app.db.session import get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models.base.enums import UserRole, UserStatus  # noqa: E402
from app.models.student.student_profile import StudentProfile  # noqa: E402
from app.models.user.user import User  # noqa: E402
from app.models.warden.warden_profile import WardenProfile  # noqa: E402
from app.services.common.security import JWTSettings, create_access_token, hash_password  # noqa: E402

fake = Faker()

DEFAULT_PASSWORD = "password123"


@dataclass
class Account:
    """A seeded user, its role profile and ready-made auth headers."""
    user: User
    profile: Optional[object] = None
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def profile_id(self) -> Optional[str]:
        return self.profile.id if self.profile is not None else None


def auth_headers_for(user: User) -> Dict[str, str]:
    token = create_access_token(
        subject=user.id,
        email=user.email,
        role=user.role,
        jwt_settings=JWTSettings.from_settings(),
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker, None]:
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    import_models()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)

    await engine.dispose()


@pytest.fixture
async def db_session(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database override"""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def _new_user(session: AsyncSession, role: UserRole, **overrides) -> User:
    user = User(
        name=overrides.pop("name", fake.name()),
        email=overrides.pop("email", fake.unique.email()).lower(),
        password_hash=hash_password(overrides.pop("password", DEFAULT_PASSWORD)),
        role=role,
        status=overrides.pop("status", UserStatus.ACTIVE),
    )
    session.add(user)
    await session.flush()
    return user


@pytest.fixture
def create_admin(db_session: AsyncSession) -> Callable[..., Awaitable[Account]]:
    async def factory(**overrides) -> Account:
        user = await _new_user(db_session, UserRole.ADMIN, **overrides)
        await db_session.commit()
        return Account(user=user, headers=auth_headers_for(user))

    return factory


@pytest.fixture
def create_warden(db_session: AsyncSession) -> Callable[..., Awaitable[Account]]:
    async def factory(hostel_block: str = "A", **overrides) -> Account:
        user = await _new_user(db_session, UserRole.WARDEN, **overrides)
        warden = WardenProfile(
            user_id=user.id,
            hostel_block=hostel_block,
            contact_number=fake.msisdn()[:10],
        )
        db_session.add(warden)
        await db_session.commit()
        return Account(user=user, profile=warden, headers=auth_headers_for(user))

    return factory


@pytest.fixture
def create_student(db_session: AsyncSession) -> Callable[..., Awaitable[Account]]:
    async def factory(hostel_block: Optional[str] = "A", **overrides) -> Account:
        roll_number = overrides.pop("roll_number", fake.unique.bothify("R####"))
        room_number = overrides.pop("room_number", str(fake.random_int(100, 499)))
        user = await _new_user(db_session, UserRole.STUDENT, **overrides)
        student = StudentProfile(
            user_id=user.id,
            roll_number=roll_number,
            hostel_block=hostel_block,
            room_number=room_number,
        )
        db_session.add(student)
        await db_session.commit()
        return Account(user=user, profile=student, headers=auth_headers_for(user))

    return factory


@pytest.fixture
async def admin(create_admin) -> Account:
    return await create_admin()


@pytest.fixture
async def warden(create_warden) -> Account:
    return await create_warden(hostel_block="A")


@pytest.fixture
async def student(create_student) -> Account:
    return await create_student(hostel_block="A")


@pytest.fixture
async def other_block_student(create_student) -> Account:
    return await create_student(hostel_block="B")
