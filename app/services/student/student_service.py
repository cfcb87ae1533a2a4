"""
Student management: admin-owned CRUD, block-scoped reads for wardens and
own-profile reads for students.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base.enums import UserRole
from app.models.student.student_profile import StudentProfile
from app.models.user.user import User
from app.repositories.student import StudentRepository
from app.repositories.user import UserRepository
from app.schemas.student import StudentCreate, StudentUpdate
from app.services.base import BaseService
from app.services.common.errors import AlreadyExistsError
from app.services.common.permissions import Action, Principal, ResourceKind, ensure_in_scope, scope
from app.services.common.security import hash_password

USER_FIELDS = ("name", "email", "status")


class StudentService(BaseService[StudentRepository]):
    resource_type = "Student"

    def __init__(self, session: AsyncSession):
        super().__init__(StudentRepository(session), session)
        self._users = UserRepository(session)

    async def list_students(self, principal: Principal, hostel_block: Optional[str] = None) -> List[StudentProfile]:
        """Admins may filter by block; a warden always gets their own block."""
        record_scope = scope(principal, ResourceKind.STUDENT, Action.READ)
        if not principal.is_admin:
            hostel_block = None
        return await self.repository.list_scoped(record_scope, hostel_block=hostel_block)

    async def get_student(self, principal: Principal, student_id: str) -> StudentProfile:
        record_scope = scope(principal, ResourceKind.STUDENT, Action.READ)
        student = await self._get_or_404(student_id)
        ensure_in_scope(principal, record_scope, student, resource_type=self.resource_type)
        return student

    async def get_own_profile(self, principal: Principal) -> StudentProfile:
        scope(principal, ResourceKind.STUDENT, Action.READ)
        return await self._get_or_404(principal.student_id)

    async def create_student(self, principal: Principal, payload: StudentCreate) -> StudentProfile:
        scope(principal, ResourceKind.STUDENT, Action.WRITE)

        if await self._users.email_exists(payload.email):
            raise AlreadyExistsError("User", "email", payload.email)
        if payload.roll_number and await self.repository.roll_number_exists(payload.roll_number):
            raise AlreadyExistsError("Student", "rollNumber", payload.roll_number)

        user = await self._users.add(
            User(
                name=payload.name,
                email=payload.email.lower(),
                password_hash=hash_password(payload.password),
                role=UserRole.STUDENT,
                status=payload.status,
            )
        )
        profile_fields = payload.model_dump(exclude={"name", "email", "password", "status"})
        student = await self.repository.add(StudentProfile(user_id=user.id, **profile_fields))
        await self._commit()

        self._logger.info(
            "Student created",
            extra={"student_id": student.id, "roll_number": student.roll_number, "by": principal.user_id},
        )
        return await self._reload(student.id)

    async def update_student(self, principal: Principal, student_id: str, payload: StudentUpdate) -> StudentProfile:
        scope(principal, ResourceKind.STUDENT, Action.WRITE)
        student = await self._get_or_404(student_id)
        changes = payload.changes()

        user_changes = {key: changes.pop(key) for key in USER_FIELDS if key in changes}
        password = changes.pop("password", None)
        if password:
            user_changes["password_hash"] = hash_password(password)

        if "email" in user_changes:
            user_changes["email"] = user_changes["email"].lower()
            if await self._users.email_exists(user_changes["email"], exclude_user_id=student.user_id):
                raise AlreadyExistsError("User", "email", user_changes["email"])
        roll_number = changes.get("roll_number")
        if roll_number and await self.repository.roll_number_exists(roll_number, exclude_id=student.id):
            raise AlreadyExistsError("Student", "rollNumber", roll_number)

        if user_changes:
            await self._users.update(student.user, user_changes)
        if changes:
            await self.repository.update(student, changes)
        await self._commit()
        return await self._reload(student.id)

    async def delete_student(self, principal: Principal, student_id: str) -> None:
        """Delete the profile, its user and every record the student owns."""
        scope(principal, ResourceKind.STUDENT, Action.WRITE)
        student = await self._get_or_404(student_id)
        await self.repository.delete_with_owned_records(student)
        await self._commit()
        self._logger.info("Student deleted", extra={"student_id": student_id, "by": principal.user_id})
