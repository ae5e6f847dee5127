"""SQLAlchemy models."""

from project_tracker.models.project import Project
from project_tracker.models.user import User

__all__ = [
    "User",
    "Project",
]
