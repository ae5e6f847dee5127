"""User persistence."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from project_tracker.exceptions import DuplicateEmailError
from project_tracker.models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Emails are compared and stored case-insensitively."""
    return email.strip().lower()


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


def get_user_by_id(db: Session, user_id: int) -> User | None:
    """Get a user by id."""
    return db.query(User).filter(User.id == user_id).first()


def create_user(db: Session, name: str, email: str, password_hash: str) -> User:
    """Create a new user from an already hashed password.

    Raises:
        DuplicateEmailError: if the email is taken, including by a concurrent insert.
    """
    email = normalize_email(email)
    if get_user_by_email(db, email):
        raise DuplicateEmailError(email)

    user = User(name=name, email=email, password_hash=password_hash)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Unique constraint hit while registering {email}")
        raise DuplicateEmailError(email) from e
    db.refresh(user)
    return user
