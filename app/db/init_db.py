# app/db/init_db.py
"""Database initialization utilities."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from app.config.settings import settings
from app.core.logging import get_logger
from app.db.base import Base, import_models
from app.db.session import AsyncSessionLocal, engine

logger = get_logger(__name__)


async def create_tables(bind: AsyncEngine = engine) -> None:
    """
    Create all tables that do not exist yet.

    Note: This is suitable for development/testing only.
    For production, manage the schema with migrations.
    """
    import_models()
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured", extra={"table_count": len(Base.metadata.tables)})


async def ensure_first_admin(session: AsyncSession) -> bool:
    """
    Create the bootstrap admin from settings when it does not exist yet.

    Returns True when an account was created.
    """
    from app.models.base.enums import UserRole
    from app.models.user.user import User
    from app.services.common.security import hash_password

    if not settings.FIRST_ADMIN_EMAIL or not settings.FIRST_ADMIN_PASSWORD:
        return False

    email = settings.FIRST_ADMIN_EMAIL.strip().lower()
    existing = await session.scalar(select(User).where(User.email == email))
    if existing is not None:
        return False

    session.add(
        User(
            name=settings.FIRST_ADMIN_NAME,
            email=email,
            password_hash=hash_password(settings.FIRST_ADMIN_PASSWORD),
            role=UserRole.ADMIN,
        )
    )
    await session.commit()
    logger.info("Bootstrap admin created", extra={"email": email})
    return True


async def init_db(create_schema: bool = True) -> None:
    """Create tables (optionally) and the bootstrap admin."""
    if create_schema:
        await create_tables()
    async with AsyncSessionLocal() as session:
        await ensure_first_admin(session)
