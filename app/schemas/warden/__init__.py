from app.schemas.warden.warden import WardenCreate, WardenResponse, WardenUpdate

__all__ = ["WardenCreate", "WardenResponse", "WardenUpdate"]
