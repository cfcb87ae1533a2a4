from app.schemas.dashboard.dashboard import (
    ActivityItem,
    AdminDashboard,
    StudentDashboard,
    WardenDashboard,
)

__all__ = ["ActivityItem", "AdminDashboard", "StudentDashboard", "WardenDashboard"]
