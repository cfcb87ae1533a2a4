# app/services/auth/auth_service.py
from __future__ import annotations

from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_struct_logger
from app.models.base.enums import UserRole
from app.models.student.student_profile import StudentProfile
from app.models.user.user import User
from app.repositories.student import StudentRepository
from app.repositories.user import UserRepository
from app.schemas.auth.login import LoginRequest, RegisterRequest
from app.services.base import BaseService
from app.services.common import errors, security
from app.services.common.permissions import PermissionDenied, Principal

security_log = get_struct_logger("app.security")


class AuthService(BaseService[UserRepository]):
    """
    Authentication service:

    - Public student self-registration
    - Email/password login with a role check that only discloses the
      real role once the password has been verified
    - Resolving a bearer token to a Principal
    """

    resource_type = "User"

    def __init__(
        self,
        session: AsyncSession,
        jwt_settings: Optional[security.JWTSettings] = None,
    ) -> None:
        super().__init__(UserRepository(session), session)
        self._students = StudentRepository(session)
        self._jwt_settings = jwt_settings or security.JWTSettings.from_settings()

    @property
    def token_lifetime_seconds(self) -> int:
        return self._jwt_settings.access_token_expires_minutes * 60

    # ------------------------------------------------------------------ #
    # Registration
    # ------------------------------------------------------------------ #
    async def register(self, payload: RegisterRequest) -> User:
        """
        Create a student account with an empty profile. Wardens and admins
        are provisioned by an admin and cannot self-register.
        """
        if payload.role != UserRole.STUDENT:
            security_log.warning("register_privileged_role_refused", role=payload.role.value)
            raise PermissionDenied(
                "Only student accounts can be self-registered",
                role=payload.role,
            )

        if await self.repository.email_exists(payload.email):
            raise errors.AlreadyExistsError("User", "email", payload.email)

        user = await self.repository.add(
            User(
                name=payload.name,
                email=payload.email,
                password_hash=security.hash_password(payload.password),
                role=UserRole.STUDENT,
            )
        )
        await self._students.add(StudentProfile(user_id=user.id))
        await self._commit()

        self._logger.info("Student registered", extra={"user_id": user.id})
        return await self._reload(user.id)

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #
    async def login(self, payload: LoginRequest) -> Tuple[str, User]:
        """
        Verify credentials and issue an access token.

        Raises:
            InvalidCredentialsError: unknown email or wrong password
            RoleMismatchError: right password, wrong claimed role
            AuthenticationError: account inactive
        """
        user = await self.repository.get_by_email(payload.email)
        if user is None or not security.verify_password(payload.password, user.password_hash):
            security_log.warning("login_failed", email=payload.email)
            raise errors.InvalidCredentialsError()

        if not user.is_active:
            security_log.warning("login_inactive_account", user_id=user.id)
            raise errors.AuthenticationError("Account is inactive")

        if payload.role is not None and payload.role != user.role:
            security_log.info(
                "login_role_mismatch",
                user_id=user.id,
                claimed_role=payload.role.value,
                actual_role=user.role.value,
            )
            raise errors.RoleMismatchError(user.role.value, payload.role.value)

        token = security.create_access_token(
            subject=user.id,
            email=user.email,
            role=user.role,
            jwt_settings=self._jwt_settings,
        )
        self._logger.info("User logged in", extra={"user_id": user.id, "role": user.role.value})
        return token, user

    # ------------------------------------------------------------------ #
    # Token resolution
    # ------------------------------------------------------------------ #
    async def principal_from_token(self, token: str) -> Principal:
        """
        Resolve a bearer token to a Principal built from the current user row.

        Raises:
            TokenDecodeError / TokenExpiredError: bad or expired token
            AuthenticationError: the user no longer exists
        """
        payload = security.decode_token(token, self._jwt_settings)
        user = await self.repository.get_by_id(payload["sub"])
        if user is None:
            raise errors.AuthenticationError("User no longer exists")
        return build_principal(user)

    async def get_user(self, user_id: str) -> User:
        return await self._get_or_404(user_id)


def build_principal(user: User) -> Principal:
    """Snapshot the user and its role profile into an immutable Principal."""
    student = user.student_profile if user.role == UserRole.STUDENT else None
    warden = user.warden_profile if user.role == UserRole.WARDEN else None
    profile = student or warden
    return Principal(
        user_id=user.id,
        role=user.role,
        email=user.email,
        name=user.name,
        is_active=user.is_active,
        student_id=student.id if student else None,
        warden_id=warden.id if warden else None,
        hostel_block=profile.hostel_block if profile else None,
    )
