"""User model."""

from sqlalchemy import Column, Integer, String

from project_tracker.database import Base
from project_tracker.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)  # stored lower-cased
    password_hash = Column(String(255), nullable=False)
