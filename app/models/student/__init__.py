from app.models.student.student_profile import StudentProfile

__all__ = ["StudentProfile"]
