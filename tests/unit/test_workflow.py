from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from app.models.base.enums import TicketStatus, UserRole
from app.services.common.errors import InvalidTransitionError
from app.services.common.permissions import PermissionDenied, Principal
from app.services.common.workflow import apply_transition, can_transition, ensure_deletable

WARDEN = Principal(user_id="u-warden", role=UserRole.WARDEN, warden_id="w-1", hostel_block="A")
STUDENT = Principal(user_id="u-student", role=UserRole.STUDENT, student_id="s-1", hostel_block="A")


def ticket(status: TicketStatus = TicketStatus.PENDING):
    return SimpleNamespace(status=status, responded_by_id=None, responded_at=None)


@pytest.mark.parametrize(
    "current,target,allowed",
    [
        (TicketStatus.PENDING, TicketStatus.IN_PROGRESS, True),
        (TicketStatus.PENDING, TicketStatus.RESOLVED, True),
        (TicketStatus.PENDING, TicketStatus.REJECTED, True),
        (TicketStatus.IN_PROGRESS, TicketStatus.RESOLVED, True),
        (TicketStatus.IN_PROGRESS, TicketStatus.PENDING, False),
        (TicketStatus.RESOLVED, TicketStatus.IN_PROGRESS, False),
        (TicketStatus.REJECTED, TicketStatus.RESOLVED, False),
    ],
)
def test_can_transition(current, target, allowed):
    assert can_transition(current, target) is allowed


def test_terminal_transition_stamps_responder():
    now = datetime(2024, 5, 1, tzinfo=timezone.utc)
    t = ticket()
    apply_transition(t, TicketStatus.RESOLVED, WARDEN, resource_type="Complaint", now=now)
    assert t.status == TicketStatus.RESOLVED
    assert t.responded_by_id == WARDEN.user_id
    assert t.responded_at == now


def test_in_progress_does_not_stamp_responder():
    t = ticket()
    apply_transition(t, TicketStatus.IN_PROGRESS, WARDEN, resource_type="Complaint")
    assert t.responded_by_id is None


def test_leaving_terminal_state_is_a_conflict():
    t = ticket(TicketStatus.RESOLVED)
    with pytest.raises(InvalidTransitionError):
        apply_transition(t, TicketStatus.IN_PROGRESS, WARDEN, resource_type="Complaint")
    assert t.status == TicketStatus.RESOLVED


def test_students_cannot_move_tickets():
    with pytest.raises(PermissionDenied):
        apply_transition(ticket(), TicketStatus.RESOLVED, STUDENT, resource_type="Complaint")


def test_student_deletes_only_pending():
    ensure_deletable(ticket(), STUDENT, resource_type="Complaint")
    with pytest.raises(PermissionDenied):
        ensure_deletable(ticket(TicketStatus.IN_PROGRESS), STUDENT, resource_type="Complaint")
    ensure_deletable(ticket(TicketStatus.RESOLVED), WARDEN, resource_type="Complaint")
