"""Database session management."""
from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.config.settings import settings


def _engine_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {"echo": settings.DATABASE_ECHO, "pool_pre_ping": True}
    # SQLite uses a single-connection pool; sizing only applies to server databases
    if settings.is_sqlite:
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_size"] = settings.DB_POOL_SIZE
        options["max_overflow"] = settings.DB_POOL_OVERFLOW
    return options


engine = create_async_engine(settings.DATABASE_URL, **_engine_options())

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function that yields a database session.

    Usage in FastAPI endpoints:
        @router.get("/items/")
        async def read_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with AsyncSessionLocal() as session:
        yield session
