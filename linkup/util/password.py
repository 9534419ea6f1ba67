"""Password hashing utilities."""

from passlib.context import CryptContext

from linkup.config import AuthSettings


def create_password_context(settings: AuthSettings) -> CryptContext:
    """Create a bcrypt password context.

    Args:
        settings: Authentication settings (bcrypt cost factor)

    Returns:
        Configured passlib context
    """
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=settings.bcrypt_rounds,
    )


def hash_password(context: CryptContext, password: str) -> str:
    """Hash a plain-text password."""
    return context.hash(password)


def verify_password(context: CryptContext, password: str, password_hash: str) -> bool:
    """Check a plain-text password against a stored hash.

    Malformed hashes count as a mismatch.
    """
    try:
        return context.verify(password, password_hash)
    except ValueError:
        return False
