"""Project model."""

from sqlalchemy import JSON, Column, ForeignKey, Index, Integer, String, Text

from project_tracker.database import Base
from project_tracker.models.mixins import TimestampMixin


class Project(Base, TimestampMixin):
    """A portfolio project owned by a single user."""

    __tablename__ = "projects"
    # Listing is always "this owner's projects, newest first"
    __table_args__ = (Index("ix_projects_user_id_created_at", "user_id", "created_at"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    github_link = Column(String(2048), nullable=False, default="", server_default="")
    tech_stack = Column(JSON, nullable=False, default=list)
