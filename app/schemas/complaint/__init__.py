from app.schemas.complaint.complaint_base import (
    ComplaintCreate,
    ComplaintResolve,
    ComplaintResponse,
    ComplaintStatusUpdate,
)

__all__ = [
    "ComplaintCreate",
    "ComplaintResolve",
    "ComplaintResponse",
    "ComplaintStatusUpdate",
]
