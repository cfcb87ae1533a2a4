"""
Authentication endpoints: student self-registration, login and the current user.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_principal, get_db
from app.schemas.auth import CurrentUserResponse, LoginRequest, RegisterRequest, TokenResponse, UserResponse
from app.services.auth import AuthService
from app.services.common.permissions import Principal

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, db: AsyncSession = Depends(get_db)) -> UserResponse:
    """Create a student account. Wardens and admins are created by an admin."""
    user = await AuthService(db).register(payload)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=TokenResponse)
async def login(payload: LoginRequest, db: AsyncSession = Depends(get_db)) -> TokenResponse:
    service = AuthService(db)
    token, user = await service.login(payload)
    return TokenResponse(
        token=token,
        expires_in=service.token_lifetime_seconds,
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=CurrentUserResponse)
async def read_me(
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
) -> CurrentUserResponse:
    user = await AuthService(db).get_user(principal.user_id)
    return CurrentUserResponse.model_validate(user)
