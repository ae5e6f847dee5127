"""Password hashing with bcrypt."""

from passlib.context import CryptContext

# Password hashing context; bcrypt generates a fresh salt per hash
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Verify a password against its hash.

    With no stored hash a dummy verification still runs, so an unknown
    account costs the same as a wrong password.
    """
    if hashed_password is None:
        pwd_context.dummy_verify()
        return False
    return pwd_context.verify(plain_password, hashed_password)
