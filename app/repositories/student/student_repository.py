"""
Student profile repository, including the cascade that removes every
record a student owns.
"""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.attendance.attendance_record import AttendanceRecord
from app.models.complaint.complaint import Complaint
from app.models.invoice.invoice import Invoice
from app.models.mess.menu_feedback import MessFeedback
from app.models.student.student_profile import StudentProfile
from app.models.suggestion.suggestion import Suggestion, SuggestionComment
from app.models.user.user import User
from app.repositories.base.base_repository import BaseRepository, apply_owner_scope
from app.services.common.permissions import Scope

OWNED_MODELS = (Complaint, AttendanceRecord, Invoice, MessFeedback)


class StudentRepository(BaseRepository[StudentProfile]):
    """Repository for student profiles."""

    def __init__(self, session: AsyncSession):
        super().__init__(StudentProfile, session)

    async def list_scoped(self, scope: Scope, hostel_block: Optional[str] = None) -> List[StudentProfile]:
        stmt = apply_owner_scope(select(StudentProfile), StudentProfile.id, scope)
        if hostel_block:
            stmt = stmt.where(StudentProfile.hostel_block == hostel_block)
        stmt = stmt.order_by(StudentProfile.roll_number, StudentProfile.created_at)
        return await self.find_all(stmt)

    async def count_scoped(self, scope: Scope) -> int:
        return await self.count(apply_owner_scope(select(StudentProfile), StudentProfile.id, scope))

    async def roll_number_exists(self, roll_number: str, exclude_id: Optional[str] = None) -> bool:
        stmt = select(StudentProfile.id).where(StudentProfile.roll_number == roll_number)
        if exclude_id:
            stmt = stmt.where(StudentProfile.id != exclude_id)
        return await self.session.scalar(stmt) is not None

    async def existing_ids(self, student_ids: List[str]) -> List[StudentProfile]:
        stmt = select(StudentProfile).where(StudentProfile.id.in_(student_ids))
        return await self.find_all(stmt)

    async def delete_with_owned_records(self, student: StudentProfile) -> None:
        """
        Remove the profile, its user account and every record it owns.
        Runs inside the caller's transaction.
        """
        suggestion_ids = select(Suggestion.id).where(Suggestion.student_id == student.id)
        await self.session.execute(
            delete(SuggestionComment).where(SuggestionComment.suggestion_id.in_(suggestion_ids))
        )
        await self.session.execute(delete(Suggestion).where(Suggestion.student_id == student.id))
        for model in OWNED_MODELS:
            await self.session.execute(delete(model).where(model.student_id == student.id))

        user_id = student.user_id
        await self.session.execute(delete(StudentProfile).where(StudentProfile.id == student.id))
        await self.session.execute(delete(User).where(User.id == user_id))
