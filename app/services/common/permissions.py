# app/services/common/permissions.py
"""
Permission and authorization utilities.

Two layers:

- Route guards: an ordered pipeline (authenticated, active, role allowed)
  that yields ``Authorized(principal)`` or ``Denied(reason)``.
- Resource scoping: ``scope(principal, kind, action)`` returns the row
  predicate a service must apply before reading or mutating a resource.
  Wardens see the students of their own hostel block, students see their
  own records, admins see everything.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Protocol, Union

from app.models.base.enums import UserRole

from .errors import AuthenticationError, AuthorizationError, NotFoundError


class PermissionDenied(AuthorizationError):
    """Raised when a user lacks required permissions."""

    def __init__(
        self,
        message: str = "Access denied",
        user_id: Optional[str] = None,
        role: Optional[UserRole] = None,
        required_permission: Optional[str] = None,
    ) -> None:
        super().__init__(message, required_permission=required_permission)
        self.user_id = user_id
        self.role = role


@dataclass(frozen=True)
class Principal:
    """
    Represents an authenticated user in the service layer.

    Attributes:
        user_id: Unique identifier for the user
        role: User's role
        student_id: StudentProfile id, for students
        warden_id: WardenProfile id, for wardens
        hostel_block: Block of the student or warden profile
    """
    user_id: str
    role: UserRole
    email: str = ""
    name: str = ""
    is_active: bool = True
    student_id: Optional[str] = None
    warden_id: Optional[str] = None
    hostel_block: Optional[str] = None

    def has_any_role(self, roles: Iterable[UserRole]) -> bool:
        return self.role in set(roles)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_warden(self) -> bool:
        return self.role == UserRole.WARDEN

    @property
    def is_student(self) -> bool:
        return self.role == UserRole.STUDENT


def role_in(principal: Principal, allowed_roles: Iterable[UserRole]) -> bool:
    """
    Check if principal's role is in the allowed set.

    Example:
        >>> if role_in(principal, [UserRole.ADMIN, UserRole.WARDEN]):
        ...     # Allow access
    """
    return principal.has_any_role(allowed_roles)


def require_role(
    principal: Principal,
    allowed_roles: Iterable[UserRole],
    *,
    error_message: Optional[str] = None,
) -> None:
    """
    Assert that principal has one of the allowed roles.

    Raises:
        PermissionDenied: If principal lacks required role
    """
    allowed_roles = list(allowed_roles)
    if not role_in(principal, allowed_roles):
        roles_str = ", ".join(r.value for r in allowed_roles)
        raise PermissionDenied(
            error_message or f"Access denied. Requires one of roles: {roles_str}",
            user_id=principal.user_id,
            role=principal.role,
        )


# ------------------------------------------------------------------ #
# Route guards
# ------------------------------------------------------------------ #

@dataclass(frozen=True)
class Authorized:
    principal: Principal


@dataclass(frozen=True)
class Denied:
    """
    A guard refusal. ``authenticated`` is False when the caller has no
    usable identity (401) and True when the identity lacks rights (403).
    """
    reason: str
    authenticated: bool = True


AuthResult = Union[Authorized, Denied]
Guard = Callable[[Principal], Optional[Denied]]


def require_active(principal: Principal) -> Optional[Denied]:
    if not principal.is_active:
        return Denied("Account is inactive", authenticated=False)
    return None


def roles_allowed(*roles: UserRole) -> Guard:
    """Guard passing principals whose role is one of ``roles``; no roles means any role."""

    def guard(principal: Principal) -> Optional[Denied]:
        if roles and not role_in(principal, roles):
            return Denied(
                "Access denied. Requires one of roles: " + ", ".join(r.value for r in roles)
            )
        return None

    return guard


def authorize(principal: Optional[Principal], *guards: Guard) -> AuthResult:
    """
    Run the guard pipeline in order: authenticated, active, then ``guards``.
    The first refusal wins.
    """
    if principal is None:
        return Denied("Not authenticated", authenticated=False)
    for guard in (require_active, *guards):
        denial = guard(principal)
        if denial is not None:
            return denial
    return Authorized(principal)


def ensure_authorized(result: AuthResult) -> Principal:
    """Unwrap an ``AuthResult``, raising the matching service error on refusal."""
    if isinstance(result, Authorized):
        return result.principal
    if not result.authenticated:
        raise AuthenticationError(result.reason)
    raise PermissionDenied(result.reason)


# ------------------------------------------------------------------ #
# Resource scoping
# ------------------------------------------------------------------ #

class ResourceKind(str, Enum):
    STUDENT = "student"
    WARDEN = "warden"
    COMPLAINT = "complaint"
    SUGGESTION = "suggestion"
    ATTENDANCE = "attendance"
    INVOICE = "invoice"
    MESS_MENU = "mess_menu"
    MESS_FEEDBACK = "mess_feedback"


class Action(str, Enum):
    READ = "read"
    WRITE = "write"


STUDENT_OWNED_KINDS = frozenset({
    ResourceKind.COMPLAINT,
    ResourceKind.SUGGESTION,
    ResourceKind.ATTENDANCE,
    ResourceKind.INVOICE,
    ResourceKind.MESS_FEEDBACK,
})


class ScopeKind(str, Enum):
    ALL = "all"
    HOSTEL_BLOCK = "hostel_block"
    OWNER = "owner"
    SELF = "self"


class StudentLike(Protocol):
    id: str
    hostel_block: Optional[str]


@dataclass(frozen=True)
class Scope:
    """
    Row predicate over one resource kind.

    ALL          no restriction
    HOSTEL_BLOCK records owned by students of ``hostel_block``
    OWNER        records owned by student ``student_id``
    SELF         the warden's own profile ``warden_id``
    """
    kind: ScopeKind
    hostel_block: Optional[str] = None
    student_id: Optional[str] = None
    warden_id: Optional[str] = None

    @classmethod
    def unrestricted(cls) -> "Scope":
        return cls(ScopeKind.ALL)

    @classmethod
    def for_block(cls, hostel_block: str) -> "Scope":
        return cls(ScopeKind.HOSTEL_BLOCK, hostel_block=hostel_block)

    @classmethod
    def for_owner(cls, student_id: str) -> "Scope":
        return cls(ScopeKind.OWNER, student_id=student_id)

    @classmethod
    def for_self(cls, warden_id: str) -> "Scope":
        return cls(ScopeKind.SELF, warden_id=warden_id)

    @property
    def is_unrestricted(self) -> bool:
        return self.kind == ScopeKind.ALL

    def permits_student(self, student: Optional[StudentLike]) -> bool:
        """Whether a record owned by ``student`` falls inside this scope."""
        if self.kind == ScopeKind.ALL:
            return True
        if student is None:
            return False
        if self.kind == ScopeKind.HOSTEL_BLOCK:
            return student.hostel_block is not None and student.hostel_block == self.hostel_block
        if self.kind == ScopeKind.OWNER:
            return student.id == self.student_id
        return False

    def permits_warden(self, warden_id: str) -> bool:
        if self.kind == ScopeKind.ALL:
            return True
        return self.kind == ScopeKind.SELF and warden_id == self.warden_id


def _deny(principal: Principal, kind: ResourceKind, action: Action) -> PermissionDenied:
    return PermissionDenied(
        f"Role '{principal.role.value}' cannot {action.value} {kind.value.replace('_', ' ')} records",
        user_id=principal.user_id,
        role=principal.role,
        required_permission=f"{kind.value}.{action.value}",
    )


def scope(principal: Principal, kind: ResourceKind, action: Action = Action.READ) -> Scope:
    """
    Resolve the caller's scope over ``kind`` for ``action``.

    Raises:
        PermissionDenied: when the role has no access at all
        NotFoundError: when a warden or student has no profile to scope by
    """
    if principal.is_admin:
        return Scope.unrestricted()

    if principal.is_warden:
        if not principal.warden_id or not principal.hostel_block:
            raise NotFoundError("Warden profile", principal.user_id)
        if kind in STUDENT_OWNED_KINDS:
            return Scope.for_block(principal.hostel_block)
        if kind == ResourceKind.STUDENT and action == Action.READ:
            return Scope.for_block(principal.hostel_block)
        if kind == ResourceKind.WARDEN and action == Action.READ:
            return Scope.for_self(principal.warden_id)
        if kind == ResourceKind.MESS_MENU:
            return Scope.unrestricted()
        raise _deny(principal, kind, action)

    if principal.is_student:
        if not principal.student_id:
            raise NotFoundError("Student profile", principal.user_id)
        if kind == ResourceKind.ATTENDANCE and action == Action.WRITE:
            raise _deny(principal, kind, action)
        if kind in STUDENT_OWNED_KINDS:
            return Scope.for_owner(principal.student_id)
        if kind == ResourceKind.STUDENT and action == Action.READ:
            return Scope.for_owner(principal.student_id)
        if kind == ResourceKind.MESS_MENU and action == Action.READ:
            return Scope.unrestricted()
        raise _deny(principal, kind, action)

    raise _deny(principal, kind, action)


def ensure_in_scope(
    principal: Principal,
    record_scope: Scope,
    student: Optional[StudentLike],
    *,
    resource_type: str,
) -> None:
    """
    Assert that a fetched record owned by ``student`` is visible under
    ``record_scope``.

    Raises:
        PermissionDenied: If the record exists but lies outside the scope
    """
    if not record_scope.permits_student(student):
        raise PermissionDenied(
            f"You do not have access to this {resource_type.lower()}",
            user_id=principal.user_id,
            role=principal.role,
        )
