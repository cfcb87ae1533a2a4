# app/api/deps.py
"""
Shared FastAPI dependencies.

Example usage in a router:
    from fastapi import Depends, APIRouter
    from app.api import deps

    router = APIRouter()

    @router.get("/me")
    async def read_me(principal: Principal = Depends(deps.require_roles())):
        return principal
"""

from typing import Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import user_id as user_id_var
from app.db.session import get_db
from app.models.base.enums import UserRole
from app.services.auth import AuthService
from app.services.common.permissions import (
    Principal,
    authorize,
    ensure_authorized,
    roles_allowed,
)

# auto_error is off so a missing header reaches the guard pipeline and
# comes back as 401 with the standard error body.
bearer_scheme = HTTPBearer(auto_error=False)


# --- Authentication ------------------------------------------------------------

async def get_optional_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> Optional[Principal]:
    """
    Resolve the bearer token to a Principal, or None when no token was sent.

    A token that is present but invalid or expired raises AuthenticationError.
    """
    if credentials is None or not credentials.credentials:
        return None
    principal = await AuthService(db).principal_from_token(credentials.credentials)
    user_id_var.set(principal.user_id)
    return principal


# --- Authorization -------------------------------------------------------------

def require_roles(*roles: UserRole) -> Callable:
    """
    Dependency factory running the guard pipeline: authenticated, active,
    then role in ``roles``. No roles means any authenticated active user.
    """

    async def dependency(
        principal: Optional[Principal] = Depends(get_optional_principal),
    ) -> Principal:
        return ensure_authorized(authorize(principal, roles_allowed(*roles)))

    return dependency


get_current_principal = require_roles()


__all__ = [
    "bearer_scheme",
    "get_current_principal",
    "get_db",
    "get_optional_principal",
    "require_roles",
]
