"""
Student endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, require_roles
from app.models.base.enums import UserRole
from app.schemas.common import MessageResponse
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.services.common.permissions import Principal
from app.services.student import StudentService

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("", response_model=List[StudentResponse])
async def list_students(
    hostel_block: Optional[str] = Query(default=None, alias="hostelBlock"),
    principal: Principal = Depends(require_roles(UserRole.ADMIN, UserRole.WARDEN)),
    db: AsyncSession = Depends(get_db),
) -> List[StudentResponse]:
    """Admins see every student; wardens see the students of their block."""
    students = await StudentService(db).list_students(principal, hostel_block)
    return [StudentResponse.model_validate(s) for s in students]


@router.get("/me", response_model=StudentResponse)
async def read_own_profile(
    principal: Principal = Depends(require_roles(UserRole.STUDENT)),
    db: AsyncSession = Depends(get_db),
) -> StudentResponse:
    return StudentResponse.model_validate(await StudentService(db).get_own_profile(principal))


@router.get("/{student_id}", response_model=StudentResponse)
async def read_student(
    student_id: str,
    principal: Principal = Depends(require_roles()),
    db: AsyncSession = Depends(get_db),
) -> StudentResponse:
    return StudentResponse.model_validate(await StudentService(db).get_student(principal, student_id))


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
async def create_student(
    payload: StudentCreate,
    principal: Principal = Depends(require_roles(UserRole.ADMIN)),
    db: AsyncSession = Depends(get_db),
) -> StudentResponse:
    return StudentResponse.model_validate(await StudentService(db).create_student(principal, payload))


@router.put("/{student_id}", response_model=StudentResponse)
async def update_student(
    student_id: str,
    payload: StudentUpdate,
    principal: Principal = Depends(require_roles(UserRole.ADMIN)),
    db: AsyncSession = Depends(get_db),
) -> StudentResponse:
    student = await StudentService(db).update_student(principal, student_id, payload)
    return StudentResponse.model_validate(student)


@router.delete("/{student_id}", response_model=MessageResponse)
async def delete_student(
    student_id: str,
    principal: Principal = Depends(require_roles(UserRole.ADMIN)),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Removes the student, their account and every record they own."""
    await StudentService(db).delete_student(principal, student_id)
    return MessageResponse(message="Student deleted successfully")
