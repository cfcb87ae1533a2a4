import pytest
from sqlalchemy.exc import IntegrityError

from app.models.base.enums import ComplaintCategory, TicketStatus, UserRole
from app.models.complaint.complaint import Complaint
from app.models.user.user import User
from app.repositories.base.base_repository import integrity_error_to_service_error
from app.repositories.complaint import ComplaintRepository
from app.repositories.user import UserRepository
from app.services.common.errors import DuplicateRecordError, ValidationError
from app.services.common.permissions import Scope


def complaint_for(student_id: str, title: str) -> Complaint:
    return Complaint(
        student_id=student_id,
        title=title,
        description="Tap leaking",
        category=ComplaintCategory.PLUMBING,
        status=TicketStatus.PENDING,
    )


async def test_owned_repository_filters_by_owner(db_session, student, other_block_student):
    repository = ComplaintRepository(db_session)
    await repository.add(complaint_for(student.profile_id, "Block A tap"))
    await repository.add(complaint_for(other_block_student.profile_id, "Block B tap"))
    await db_session.commit()

    everything = await repository.list_scoped(Scope.unrestricted())
    assert {c.title for c in everything} == {"Block A tap", "Block B tap"}

    block_a = await repository.list_scoped(Scope.for_block("A"))
    assert [c.title for c in block_a] == ["Block A tap"]

    own = await repository.list_scoped(Scope.for_owner(other_block_student.profile_id))
    assert [c.title for c in own] == ["Block B tap"]

    assert await repository.count_scoped(Scope.for_block("B")) == 1
    assert len(await repository.recent(Scope.unrestricted(), limit=1)) == 1


def integrity_error(message: str) -> IntegrityError:
    return IntegrityError("INSERT INTO users ...", {}, Exception(message))


@pytest.mark.parametrize(
    "message",
    [
        "UNIQUE constraint failed: users.email",
        'duplicate key value violates unique constraint "users_email_key"',
    ],
)
def test_unique_violations_are_duplicates(message):
    error = integrity_error_to_service_error(integrity_error(message), "User")
    assert isinstance(error, DuplicateRecordError)


@pytest.mark.parametrize(
    "message",
    [
        "NOT NULL constraint failed: users.name",
        "FOREIGN KEY constraint failed",
    ],
)
def test_other_constraint_failures_are_validation_errors(message):
    error = integrity_error_to_service_error(integrity_error(message), "User")
    assert isinstance(error, ValidationError)
    assert not isinstance(error, DuplicateRecordError)


async def test_flush_reports_missing_required_value_as_validation_error(db_session):
    repository = UserRepository(db_session)
    with pytest.raises(ValidationError):
        await repository.add(User(name=None, email="nobody@example.com", password_hash="x", role=UserRole.STUDENT))
