from sqlalchemy import select

from app.config.settings import settings
from app.db.init_db import ensure_first_admin
from app.main import create_app
from app.models.base.enums import UserRole
from app.models.user.user import User


async def test_first_admin_is_created_once(db_session, monkeypatch):
    monkeypatch.setattr(settings, "FIRST_ADMIN_EMAIL", "Root@Hostel.local")
    monkeypatch.setattr(settings, "FIRST_ADMIN_PASSWORD", "rootpass1")

    assert await ensure_first_admin(db_session) is True
    assert await ensure_first_admin(db_session) is False

    admin = await db_session.scalar(select(User).where(User.email == "root@hostel.local"))
    assert admin.role == UserRole.ADMIN


async def test_first_admin_needs_credentials(db_session, monkeypatch):
    monkeypatch.setattr(settings, "FIRST_ADMIN_EMAIL", "root@hostel.local")
    monkeypatch.setattr(settings, "FIRST_ADMIN_PASSWORD", None)
    assert await ensure_first_admin(db_session) is False


async def test_production_startup_bootstraps_admin_without_creating_tables(monkeypatch):
    calls = []

    async def record_init_db(create_schema: bool = True) -> None:
        calls.append(create_schema)

    monkeypatch.setattr("app.main.init_db", record_init_db)
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")

    application = create_app()
    for handler in application.router.on_startup:
        await handler()

    assert calls == [False]
