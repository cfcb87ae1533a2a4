from app.repositories.student.student_repository import StudentRepository

__all__ = ["StudentRepository"]
