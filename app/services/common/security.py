# app/services/common/security.py
"""
Security utilities for authentication.

Provides password hashing with bcrypt and JWT access token management.
A token is self-contained: a valid signature and an unexpired `exp` claim
are the proof of identity; nothing is stored server-side.
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError
from passlib.context import CryptContext

from app.config.settings import settings
from app.models.base.enums import UserRole

from .errors import AuthenticationError, ValidationError


# ------------------------------------------------------------------ #
# Configuration
# ------------------------------------------------------------------ #

_pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.PASSWORD_BCRYPT_ROUNDS,
)


@dataclass(frozen=True)
class JWTSettings:
    """
    JWT configuration settings.

    Example:
        >>> jwt_settings = JWTSettings(
        ...     secret_key=settings.JWT_SECRET_KEY,
        ...     algorithm="HS256",
        ...     access_token_expires_minutes=60,
        ... )
    """
    secret_key: str
    algorithm: str = "HS256"
    access_token_expires_minutes: int = 60

    def __post_init__(self) -> None:
        if not self.secret_key:
            raise ValueError("JWT secret_key cannot be empty")
        if self.access_token_expires_minutes <= 0:
            raise ValueError("access_token_expires_minutes must be positive")

    @classmethod
    def from_settings(cls) -> "JWTSettings":
        return cls(
            secret_key=settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
            access_token_expires_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        )


# ------------------------------------------------------------------ #
# Password hashing
# ------------------------------------------------------------------ #

def _prepare_password_for_bcrypt(password: str) -> str:
    """
    Bcrypt only looks at the first 72 bytes; longer passwords are
    pre-hashed with SHA-256 so every byte still counts.
    """
    if len(password.encode('utf-8')) > 71:
        return hashlib.sha256(password.encode('utf-8')).hexdigest()
    return password


def hash_password(password: str) -> str:
    """
    Hash a plaintext password using bcrypt.

    Raises:
        ValidationError: If password is empty
    """
    if not password:
        raise ValidationError("Password cannot be empty", field="password")
    return _pwd_context.hash(_prepare_password_for_bcrypt(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plaintext password against a stored hash."""
    if not plain_password or not hashed_password:
        return False
    try:
        return _pwd_context.verify(_prepare_password_for_bcrypt(plain_password), hashed_password)
    except ValueError:
        # Malformed or unknown hash format
        return False


# ------------------------------------------------------------------ #
# JWT utilities
# ------------------------------------------------------------------ #

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenDecodeError(AuthenticationError):
    """Raised when JWT token decoding fails."""

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)


class TokenExpiredError(TokenDecodeError):
    """Raised when JWT token has expired."""

    def __init__(self) -> None:
        super().__init__("Token has expired")


def create_access_token(
    *,
    subject: str,
    email: str,
    role: UserRole,
    jwt_settings: JWTSettings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a signed JWT access token.

    Example:
        >>> token = create_access_token(
        ...     subject=user.id,
        ...     email=user.email,
        ...     role=user.role,
        ...     jwt_settings=JWTSettings.from_settings(),
        ... )
    """
    now = _utcnow()
    if expires_delta is None:
        expires_delta = timedelta(minutes=jwt_settings.access_token_expires_minutes)

    payload: dict[str, Any] = {
        "sub": str(subject),
        "user_id": str(subject),
        "email": email,
        "role": role.value,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
        "type": "access",
    }
    return jwt.encode(payload, jwt_settings.secret_key, algorithm=jwt_settings.algorithm)


def decode_token(token: str, jwt_settings: JWTSettings) -> dict[str, Any]:
    """
    Decode and validate an access token.

    Raises:
        TokenExpiredError: If token has expired
        TokenDecodeError: If the token is malformed, badly signed, not an
            access token or has no subject
    """
    try:
        payload = jwt.decode(token, jwt_settings.secret_key, algorithms=[jwt_settings.algorithm])
    except ExpiredSignatureError as exc:
        raise TokenExpiredError() from exc
    except JWTError as exc:
        raise TokenDecodeError("Invalid or malformed token") from exc

    if payload.get("type") != "access":
        raise TokenDecodeError("Expected an access token")
    if not payload.get("sub"):
        raise TokenDecodeError("Token missing user identifier")
    return payload
