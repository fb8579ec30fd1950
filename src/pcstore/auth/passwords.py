"""Password hashing."""

from passlib.context import CryptContext

_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return _context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    try:
        return _context.verify(password, password_hash)
    except ValueError:
        # Stored value is not a recognised hash
        return False
