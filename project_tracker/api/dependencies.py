"""FastAPI dependencies for authentication and services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from project_tracker.config import get_settings
from project_tracker.database import get_db
from project_tracker.exceptions import InvalidTokenError
from project_tracker.services.projects import ProjectService
from project_tracker.services.tokens import TokenClaims, TokenService

# auto_error is off so a missing header maps to 401 rather than FastAPI's default
security = HTTPBearer(auto_error=False)


@lru_cache
def get_token_service() -> TokenService:
    """Token service built once from the process settings."""
    return TokenService.from_settings(get_settings())


def get_current_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> TokenClaims:
    """Verify the bearer token and return the caller's identity."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return token_service.verify(credentials.credentials)
    except InvalidTokenError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token",
        ) from None


def get_project_service(
    db: Annotated[Session, Depends(get_db)],
) -> ProjectService:
    """Get project service with dependencies."""
    return ProjectService(db)
