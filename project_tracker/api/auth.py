"""Authentication API endpoints."""

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from project_tracker.api.dependencies import get_current_claims, get_token_service
from project_tracker.database import get_db
from project_tracker.exceptions import DuplicateEmailError
from project_tracker.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from project_tracker.schemas.common import ErrorResponse
from project_tracker.services.passwords import get_password_hash, verify_password
from project_tracker.services.tokens import TokenClaims, TokenService
from project_tracker.services.users import create_user, get_user_by_email, get_user_by_id

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/auth",
    tags=["auth"],
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
):
    """Register a new user."""
    # bcrypt is slow on purpose, keep it off the event loop
    password_hash = await asyncio.to_thread(get_password_hash, user_data.password)

    try:
        user = create_user(db, user_data.name, user_data.email, password_hash)
    except DuplicateEmailError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists",
        ) from None

    logger.info(f"Registered user {user.id}")
    return AuthResponse(
        token=token_service.issue(user.id, user.email),
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
):
    """Login with email and password."""
    user = get_user_by_email(db, credentials.email)
    valid = await asyncio.to_thread(
        verify_password, credentials.password, user.password_hash if user else None
    )

    # Same answer whether the account is missing or the password is wrong
    if user is None or not valid:
        logger.info("Failed login attempt")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials",
        )

    logger.info(f"User {user.id} logged in")
    return AuthResponse(
        token=token_service.issue(user.id, user.email),
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserResponse)
async def get_me(
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get current user information."""
    user = get_user_by_id(db, claims.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
