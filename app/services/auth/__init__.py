from app.services.auth.auth_service import AuthService, build_principal

__all__ = ["AuthService", "build_principal"]
