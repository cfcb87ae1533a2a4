# app/services/common/workflow.py
"""
Ticket workflow shared by complaints and suggestions.

    Pending ──> In Progress ──> Resolved | Rejected
       └───────────────────────> Resolved | Rejected

Resolved and Rejected are terminal. Only wardens and admins move tickets.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, FrozenSet, Optional

from app.models.base.enums import TicketStatus, UserRole

from .errors import InvalidTransitionError
from .permissions import PermissionDenied, Principal, require_role

ALLOWED_TRANSITIONS: Dict[TicketStatus, FrozenSet[TicketStatus]] = {
    TicketStatus.PENDING: frozenset({
        TicketStatus.IN_PROGRESS,
        TicketStatus.RESOLVED,
        TicketStatus.REJECTED,
    }),
    TicketStatus.IN_PROGRESS: frozenset({
        TicketStatus.RESOLVED,
        TicketStatus.REJECTED,
    }),
    TicketStatus.RESOLVED: frozenset(),
    TicketStatus.REJECTED: frozenset(),
}

HANDLER_ROLES = (UserRole.WARDEN, UserRole.ADMIN)


def can_transition(current: TicketStatus, target: TicketStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[current]


def apply_transition(
    ticket,
    target: TicketStatus,
    principal: Principal,
    *,
    resource_type: str,
    now: Optional[datetime] = None,
) -> None:
    """
    Move ``ticket`` to ``target`` on behalf of ``principal``.

    Entering a terminal state stamps the responder and the response time.

    Raises:
        PermissionDenied: If the caller is not a warden or admin
        InvalidTransitionError: If the move is not allowed from the current state
    """
    require_role(
        principal,
        HANDLER_ROLES,
        error_message=f"Only wardens and admins can change the status of a {resource_type.lower()}",
    )
    if not can_transition(ticket.status, target):
        raise InvalidTransitionError(resource_type, ticket.status.value, target.value)

    ticket.status = target
    if target.is_terminal:
        ticket.responded_by_id = principal.user_id
        ticket.responded_at = now or datetime.now(timezone.utc)


def ensure_deletable(ticket, principal: Principal, *, resource_type: str) -> None:
    """
    The owning student may withdraw a ticket only while it is still Pending.
    Handlers in scope may delete in any state.
    """
    if principal.is_student and ticket.status != TicketStatus.PENDING:
        raise PermissionDenied(
            f"Only pending {resource_type.lower()}s can be deleted",
            user_id=principal.user_id,
            role=principal.role,
        )
