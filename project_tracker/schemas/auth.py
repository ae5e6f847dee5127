"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from project_tracker.schemas.fields import RequiredStr

MIN_PASSWORD_LENGTH = 6
# bcrypt ignores everything past the first 72 bytes
MAX_PASSWORD_BYTES = 72


class UserRegister(BaseModel):
    """User registration request."""

    model_config = ConfigDict(extra="forbid")

    name: RequiredStr = Field(..., max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("password")
    @classmethod
    def check_password_length(cls, v: str) -> str:
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class UserLogin(BaseModel):
    """User login request.

    The email is not format-checked: anything that matches no account gets
    the same generic error as a wrong password.
    """

    model_config = ConfigDict(extra="forbid")

    email: RequiredStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()
