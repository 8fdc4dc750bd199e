"""
Password hashing (argon2id).
"""

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHash, VerificationError

_hasher = PasswordHasher(type=Type.ID)


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password_hash: str | None, password: str) -> bool:
    """Check a password against a stored hash. Missing hashes never match."""
    if not password_hash:
        return False
    try:
        return _hasher.verify(password_hash, password)
    except (VerificationError, InvalidHash):
        return False
