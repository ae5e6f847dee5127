"""Pydantic schemas for API requests and responses."""

from project_tracker.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from project_tracker.schemas.common import ErrorResponse, MessageResponse
from project_tracker.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectResponse",
    "MessageResponse",
    "ErrorResponse",
]
