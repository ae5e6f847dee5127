"""Issuing and verifying signed access tokens."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from project_tracker.config import Settings
from project_tracker.exceptions import InvalidTokenError


@dataclass(frozen=True)
class TokenClaims:
    """Identity asserted by a verified token."""

    user_id: int
    email: str


@dataclass(frozen=True)
class TokenService:
    """Stateless HMAC-signed JWTs.

    The secret is fixed for the lifetime of the service; rotating it
    invalidates every token issued before.
    """

    secret: str
    algorithm: str = "HS256"
    lifetime: timedelta = timedelta(days=7)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            lifetime=timedelta(minutes=settings.jwt_expiration_minutes),
        )

    def issue(self, user_id: int, email: str) -> str:
        """Create a token for the user that expires after the configured lifetime."""
        expire = datetime.now(UTC) + self.lifetime
        to_encode = {
            "sub": str(user_id),
            "email": email,
            "exp": expire,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Check signature, expiry and payload shape.

        Raises:
            InvalidTokenError: if any of the checks fail.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        email = payload.get("email")
        if not isinstance(email, str) or not email:
            raise InvalidTokenError("Token has no email claim")
        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError) as e:
            raise InvalidTokenError("Token subject is not a user id") from e

        return TokenClaims(user_id=user_id, email=email)
