"""Domain errors raised by the stores and the token service."""


class DuplicateEmailError(Exception):
    """A user with this email is already registered."""

    def __init__(self, email: str):
        super().__init__(f"Email already registered: {email}")
        self.email = email


class InvalidTokenError(Exception):
    """The token signature, payload or expiry did not validate."""
