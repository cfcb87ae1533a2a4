"""Role guards and resource scoping."""
from types import SimpleNamespace

import pytest

from app.models.base.enums import UserRole
from app.services.common.errors import AuthenticationError, NotFoundError
from app.services.common.permissions import (
    Action,
    Authorized,
    Denied,
    PermissionDenied,
    Principal,
    ResourceKind,
    STUDENT_OWNED_KINDS,
    Scope,
    ScopeKind,
    authorize,
    ensure_authorized,
    ensure_in_scope,
    require_role,
    roles_allowed,
    scope,
)

ADMIN = Principal(user_id="u-admin", role=UserRole.ADMIN)
WARDEN_A = Principal(user_id="u-warden", role=UserRole.WARDEN, warden_id="w-1", hostel_block="A")
STUDENT_A = Principal(user_id="u-student", role=UserRole.STUDENT, student_id="s-1", hostel_block="A")


def student_record(student_id: str, block: str):
    return SimpleNamespace(id=student_id, hostel_block=block)


class TestGuardPipeline:
    def test_missing_principal_is_unauthenticated(self):
        result = authorize(None, roles_allowed(UserRole.ADMIN))
        assert isinstance(result, Denied)
        assert result.authenticated is False

    def test_inactive_principal_is_refused_before_role_check(self):
        inactive = Principal(user_id="u", role=UserRole.ADMIN, is_active=False)
        result = authorize(inactive, roles_allowed(UserRole.STUDENT))
        assert isinstance(result, Denied)
        assert result.reason == "Account is inactive"

    def test_wrong_role_is_forbidden(self):
        result = authorize(STUDENT_A, roles_allowed(UserRole.ADMIN, UserRole.WARDEN))
        assert isinstance(result, Denied)
        assert result.authenticated is True

    def test_no_roles_means_any_authenticated_user(self):
        assert authorize(STUDENT_A, roles_allowed()) == Authorized(STUDENT_A)

    def test_ensure_authorized_maps_denials_to_errors(self):
        with pytest.raises(AuthenticationError):
            ensure_authorized(Denied("Not authenticated", authenticated=False))
        with pytest.raises(PermissionDenied):
            ensure_authorized(Denied("nope"))
        assert ensure_authorized(Authorized(ADMIN)) is ADMIN

    def test_require_role(self):
        require_role(WARDEN_A, [UserRole.WARDEN, UserRole.ADMIN])
        with pytest.raises(PermissionDenied):
            require_role(STUDENT_A, [UserRole.ADMIN])


class TestScope:
    @pytest.mark.parametrize("kind", list(ResourceKind))
    @pytest.mark.parametrize("action", list(Action))
    def test_admin_is_unrestricted(self, kind, action):
        assert scope(ADMIN, kind, action).is_unrestricted

    @pytest.mark.parametrize("kind", sorted(STUDENT_OWNED_KINDS, key=lambda k: k.value))
    def test_warden_sees_own_block(self, kind):
        result = scope(WARDEN_A, kind, Action.WRITE)
        assert result == Scope.for_block("A")

    def test_warden_reads_students_of_block_but_cannot_manage_them(self):
        assert scope(WARDEN_A, ResourceKind.STUDENT, Action.READ).kind == ScopeKind.HOSTEL_BLOCK
        with pytest.raises(PermissionDenied):
            scope(WARDEN_A, ResourceKind.STUDENT, Action.WRITE)

    def test_warden_reads_only_self_among_wardens(self):
        result = scope(WARDEN_A, ResourceKind.WARDEN, Action.READ)
        assert result.permits_warden("w-1")
        assert not result.permits_warden("w-2")

    def test_warden_without_profile(self):
        bare = Principal(user_id="u", role=UserRole.WARDEN)
        with pytest.raises(NotFoundError):
            scope(bare, ResourceKind.COMPLAINT)

    def test_student_owner_scope(self):
        result = scope(STUDENT_A, ResourceKind.INVOICE, Action.READ)
        assert result == Scope.for_owner("s-1")
        assert result.permits_student(student_record("s-1", "A"))
        assert not result.permits_student(student_record("s-2", "A"))

    def test_student_cannot_write_attendance(self):
        with pytest.raises(PermissionDenied):
            scope(STUDENT_A, ResourceKind.ATTENDANCE, Action.WRITE)

    def test_student_reads_menu_but_cannot_edit(self):
        assert scope(STUDENT_A, ResourceKind.MESS_MENU, Action.READ).is_unrestricted
        with pytest.raises(PermissionDenied):
            scope(STUDENT_A, ResourceKind.MESS_MENU, Action.WRITE)

    def test_student_has_no_access_to_wardens(self):
        with pytest.raises(PermissionDenied):
            scope(STUDENT_A, ResourceKind.WARDEN, Action.READ)

    def test_student_without_profile(self):
        bare = Principal(user_id="u", role=UserRole.STUDENT)
        with pytest.raises(NotFoundError):
            scope(bare, ResourceKind.COMPLAINT)

    def test_block_scope_excludes_students_without_block(self):
        block = Scope.for_block("A")
        assert block.permits_student(student_record("s-1", "A"))
        assert not block.permits_student(student_record("s-2", "B"))
        assert not block.permits_student(student_record("s-3", None))
        assert not block.permits_student(None)

    def test_ensure_in_scope_raises_forbidden(self):
        with pytest.raises(PermissionDenied):
            ensure_in_scope(
                WARDEN_A,
                Scope.for_block("A"),
                student_record("s-9", "B"),
                resource_type="Complaint",
            )
