from datetime import date

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from app.models.attendance.attendance_record import AttendanceRecord
from app.models.base.enums import AttendanceStatus
from app.repositories.attendance import AttendanceRepository
from app.services.common.errors import DuplicateRecordError

TODAY = date.today()


async def mark(client: AsyncClient, account, student_id: str, status: str, day: date = TODAY):
    return await client.post(
        "/api/attendance/mark",
        headers=account.headers,
        json={"studentId": student_id, "date": day.isoformat(), "status": status},
    )


async def test_mark_is_idempotent_upsert(client: AsyncClient, db_session, warden, student):
    created = await mark(client, warden, student.profile_id, "Present")
    assert created.status_code == 201
    assert created.json()["date"] == TODAY.isoformat()

    overwritten = await mark(client, warden, student.profile_id, "Absent")
    assert overwritten.status_code == 200
    assert overwritten.json()["id"] == created.json()["id"]
    assert overwritten.json()["status"] == "Absent"

    count = await db_session.scalar(
        select(func.count()).select_from(AttendanceRecord).where(AttendanceRecord.student_id == student.profile_id)
    )
    assert count == 1


async def test_warden_cannot_mark_other_block(client: AsyncClient, warden, other_block_student):
    response = await mark(client, warden, other_block_student.profile_id, "Present")
    assert response.status_code == 403


async def test_student_cannot_mark(client: AsyncClient, student):
    response = await mark(client, student, student.profile_id, "Present")
    assert response.status_code == 403


async def test_mark_unknown_student(client: AsyncClient, admin):
    response = await mark(client, admin, "ghost", "Present")
    assert response.status_code == 404


async def test_time_out_before_time_in_rejected(client: AsyncClient, warden, student):
    response = await client.post(
        "/api/attendance/mark",
        headers=warden.headers,
        json={
            "studentId": student.profile_id,
            "date": TODAY.isoformat(),
            "status": "Late",
            "timeIn": "09:30:00",
            "timeOut": "08:00:00",
        },
    )
    assert response.status_code == 400


async def test_bulk_mark(client: AsyncClient, warden, student, create_student):
    classmate = await create_student(hostel_block="A")
    response = await client.post(
        "/api/attendance/bulk-mark",
        headers=warden.headers,
        json={
            "date": TODAY.isoformat(),
            "records": [
                {"studentId": student.profile_id, "status": "Present"},
                {"studentId": classmate.profile_id, "status": "Late"},
            ],
        },
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Attendance marked successfully", "count": 2}

    listed = await client.get("/api/attendance", params={"date": TODAY.isoformat()}, headers=warden.headers)
    assert {r["status"] for r in listed.json()} == {"Present", "Late"}


async def test_bulk_mark_is_all_or_nothing(client: AsyncClient, warden, student, other_block_student):
    response = await client.post(
        "/api/attendance/bulk-mark",
        headers=warden.headers,
        json={
            "date": TODAY.isoformat(),
            "records": [
                {"studentId": student.profile_id, "status": "Present"},
                {"studentId": other_block_student.profile_id, "status": "Present"},
            ],
        },
    )
    assert response.status_code == 403

    listed = await client.get("/api/attendance", headers=warden.headers)
    assert listed.json() == []


async def test_my_attendance_by_month(client: AsyncClient, warden, student):
    await mark(client, warden, student.profile_id, "Present", date(2024, 3, 4))
    await mark(client, warden, student.profile_id, "Absent", date(2024, 4, 1))

    march = await client.get("/api/attendance/my-attendance", params={"month": 3, "year": 2024}, headers=student.headers)
    assert [r["date"] for r in march.json()] == ["2024-03-04"]

    everything = await client.get("/api/attendance/my-attendance", headers=student.headers)
    assert [r["date"] for r in everything.json()] == ["2024-04-01", "2024-03-04"]


async def test_records_for_student_scoped(client: AsyncClient, warden, student, other_block_student):
    await mark(client, warden, student.profile_id, "Present")
    own = await client.get(f"/api/attendance/records/{student.profile_id}", headers=student.headers)
    assert len(own.json()) == 1

    other = await client.get(f"/api/attendance/records/{other_block_student.profile_id}", headers=student.headers)
    assert other.status_code == 403


async def test_stats(client: AsyncClient, warden, student, create_student):
    perfect = await create_student(hostel_block="A")
    await mark(client, warden, student.profile_id, "Present", date(2024, 3, 4))
    await mark(client, warden, student.profile_id, "Absent", date(2024, 3, 5))
    await mark(client, warden, perfect.profile_id, "Late", date(2024, 3, 4))
    await mark(client, warden, perfect.profile_id, "Holiday", date(2024, 3, 5))

    response = await client.get("/api/attendance/stats", params={"month": 3, "year": 2024}, headers=warden.headers)
    assert response.status_code == 200
    assert response.json() == {
        "averageAttendance": 67,
        "lowAttendanceCount": 1,
        "perfectAttendanceCount": 1,
        "totalStudents": 2,
        "month": 3,
        "year": 2024,
    }


async def test_concurrent_first_mark_loses_on_constraint(db_session, student):
    repository = AttendanceRepository(db_session)
    await repository.add(
        AttendanceRecord(student_id=student.profile_id, attendance_date=TODAY, status=AttendanceStatus.PRESENT)
    )
    await db_session.commit()

    with pytest.raises(DuplicateRecordError):
        await repository.add(
            AttendanceRecord(student_id=student.profile_id, attendance_date=TODAY, status=AttendanceStatus.ABSENT)
        )
