from datetime import date
from types import SimpleNamespace

from app.models.base.enums import AttendanceStatus as S
from app.services.attendance import attendance_percentage, compute_stats, month_bounds, summarize_by_student


def rec(student_id: str, status: S):
    return SimpleNamespace(student_id=student_id, status=status)


def test_month_bounds_wraps_december():
    assert month_bounds(12, 2024) == (date(2024, 12, 1), date(2025, 1, 1))
    assert month_bounds(2, 2024) == (date(2024, 2, 1), date(2024, 3, 1))


def test_percentage_counts_late_as_attended_and_skips_holidays():
    assert attendance_percentage({S.PRESENT: 2, S.LATE: 1, S.ABSENT: 1, S.HOLIDAY: 3}) == 75.0
    assert attendance_percentage({S.WEEKEND: 2}) is None


def test_summaries_per_student():
    summaries = summarize_by_student([rec("a", S.PRESENT), rec("a", S.ABSENT), rec("b", S.LATE)])
    assert summaries["a"].percentage == 50.0
    assert summaries["a"].absent == 1
    assert summaries["b"].percentage == 100.0


def test_compute_stats():
    records = (
        [rec("a", S.PRESENT)] * 4
        + [rec("b", S.PRESENT), rec("b", S.ABSENT), rec("b", S.ABSENT), rec("b", S.ABSENT)]
        + [rec("c", S.HOLIDAY)]
    )
    stats = compute_stats(records, total_students=3, low_threshold=75, month=3, year=2024)
    assert stats.average_attendance == 62  # 5 of 8 countable days
    assert stats.perfect_attendance_count == 1
    assert stats.low_attendance_count == 1
    assert stats.total_students == 3
    assert (stats.month, stats.year) == (3, 2024)


def test_compute_stats_without_records():
    stats = compute_stats([], total_students=0, low_threshold=75)
    assert stats.average_attendance == 0
    assert stats.low_attendance_count == 0
