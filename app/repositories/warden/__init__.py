from app.repositories.warden.warden_repository import WardenRepository

__all__ = ["WardenRepository"]
