from app.repositories.complaint.complaint_repository import ComplaintRepository

__all__ = ["ComplaintRepository"]
