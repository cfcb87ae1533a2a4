# app/services/common/errors.py
"""
Service-layer exceptions.

These exceptions are raised by service methods and should be caught
at the API layer to return appropriate HTTP responses.
"""
from __future__ import annotations

from typing import Any, Optional
from uuid import UUID


class ServiceError(Exception):
    """Base exception for all service-layer errors."""
    
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NotFoundError(ServiceError):
    """Raised when a requested resource does not exist."""
    
    def __init__(
        self,
        resource_type: str,
        identifier: UUID | str | int,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource_type} with identifier '{identifier}' not found"
        super().__init__(message, details)
        self.resource_type = resource_type
        self.identifier = identifier


class AlreadyExistsError(ServiceError):
    """Raised when attempting to create a resource that already exists."""
    
    def __init__(
        self,
        resource_type: str,
        field: str,
        value: Any,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource_type} with {field}='{value}' already exists"
        super().__init__(message, details)
        self.resource_type = resource_type
        self.field = field
        self.value = value


class ValidationError(ServiceError):
    """Raised when business logic validation fails."""
    
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.field = field


class AuthenticationError(ServiceError):
    """Raised when authentication fails."""
    
    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class AuthorizationError(ServiceError):
    """Raised when a user lacks permission for an action."""
    
    def __init__(
        self,
        message: str = "Authorization failed",
        required_permission: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.required_permission = required_permission


class ConflictError(ServiceError):
    """Raised when an operation conflicts with current state."""
    
    def __init__(
        self,
        message: str,
        conflicting_field: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.conflicting_field = conflicting_field


class BusinessRuleViolation(ServiceError):
    """Raised when a business rule is violated."""
    
    def __init__(
        self,
        rule_name: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.rule_name = rule_name

# ------------------------------------------------------------------ #
# Domain-specific errors
# ------------------------------------------------------------------ #

class InvalidCredentialsError(ValidationError):
    """Raised when the email is unknown or the password does not match."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class RoleMismatchError(ValidationError):
    """
    Raised when the password matches but the client logged in under the
    wrong role. The actual role is returned so the client can retry.
    """

    def __init__(self, actual_role: str, claimed_role: str) -> None:
        super().__init__(
            f"You are registered as a {actual_role}, not a {claimed_role}",
            field="role",
            details={
                "actualRole": actual_role,
                "suggestedAction": f"Please log in as {actual_role}",
            },
        )
        self.actual_role = actual_role
        self.claimed_role = claimed_role


class DuplicateRecordError(ConflictError):
    """Raised when a unique constraint rejects a concurrent insert."""

    def __init__(self, resource_type: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"{resource_type} already exists")
        self.resource_type = resource_type


class InvalidTransitionError(ConflictError):
    """Raised when a workflow state change is not allowed from the current state."""

    def __init__(self, resource_type: str, current: str, target: str) -> None:
        super().__init__(
            f"{resource_type} cannot move from '{current}' to '{target}'",
            conflicting_field="status",
            details={"currentStatus": current, "requestedStatus": target},
        )


class AlreadyPaidError(BusinessRuleViolation):
    """Raised when paying or re-pricing an invoice that is already paid."""

    def __init__(self, invoice_number: str) -> None:
        super().__init__("invoice_already_paid", f"Invoice {invoice_number} is already paid")
        self.invoice_number = invoice_number
