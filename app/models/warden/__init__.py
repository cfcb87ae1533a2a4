from app.models.warden.warden_profile import WardenProfile

__all__ = ["WardenProfile"]
