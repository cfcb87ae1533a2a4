from app.schemas.student.student_base import StudentCreate, StudentResponse, StudentUpdate

__all__ = ["StudentCreate", "StudentResponse", "StudentUpdate"]
