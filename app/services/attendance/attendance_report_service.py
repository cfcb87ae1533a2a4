"""
Attendance reporting.

Pure read-side computations over already-scoped records; nothing here is
persisted. A day counts towards the percentage when it is Present, Absent
or Late, and is attended when it is Present or Late. Weekend and Holiday
days are left out entirely.
"""

from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, Optional, Tuple

from app.models.attendance.attendance_record import AttendanceRecord
from app.models.base.enums import AttendanceStatus
from app.schemas.attendance import AttendanceStats, StudentAttendanceSummary


def month_bounds(month: int, year: int) -> Tuple[date, date]:
    """First day of the month and first day of the following month."""
    start = date(year, month, 1)
    end = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    return start, end


def summarize_by_student(records: Iterable[AttendanceRecord]) -> Dict[str, StudentAttendanceSummary]:
    counts: Dict[str, Dict[AttendanceStatus, int]] = defaultdict(lambda: defaultdict(int))
    for record in records:
        counts[record.student_id][record.status] += 1

    summaries = {}
    for student_id, by_status in counts.items():
        summaries[student_id] = StudentAttendanceSummary(
            student_id=student_id,
            present=by_status[AttendanceStatus.PRESENT],
            absent=by_status[AttendanceStatus.ABSENT],
            late=by_status[AttendanceStatus.LATE],
            weekend=by_status[AttendanceStatus.WEEKEND],
            holiday=by_status[AttendanceStatus.HOLIDAY],
            percentage=attendance_percentage(by_status),
        )
    return summaries


def attendance_percentage(by_status: Dict[AttendanceStatus, int]) -> Optional[float]:
    """Attended over countable days, or None when no day counts."""
    attended = sum(n for status, n in by_status.items() if status.is_attended)
    countable = sum(n for status, n in by_status.items() if status.is_countable)
    if countable == 0:
        return None
    return round(attended * 100 / countable, 2)


def compute_stats(
    records: Iterable[AttendanceRecord],
    total_students: int,
    low_threshold: float,
    month: Optional[int] = None,
    year: Optional[int] = None,
) -> AttendanceStats:
    """
    Block or hostel statistics for a period.

    The average pools every countable day of every student. Students with no
    countable day are neither low nor perfect.
    """
    records = list(records)
    summaries = summarize_by_student(records)

    attended = sum(1 for record in records if record.status.is_attended)
    countable = sum(1 for record in records if record.status.is_countable)
    average = round(attended * 100 / countable) if countable else 0

    percentages = [s.percentage for s in summaries.values() if s.percentage is not None]
    return AttendanceStats(
        average_attendance=average,
        low_attendance_count=sum(1 for p in percentages if p < low_threshold),
        perfect_attendance_count=sum(1 for p in percentages if p == 100),
        total_students=total_students,
        month=month,
        year=year,
    )
