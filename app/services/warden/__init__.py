from app.services.warden.warden_service import WardenService

__all__ = ["WardenService"]
