"""
Users module.

Credential store access and profile/admin operations on identity records.

Public API:
- IUserRepository: Credential store port
- IUserService: Profile and admin operations
- Users exceptions: UserNotFoundError, DuplicateEmailError, InvalidPasswordError
"""

from .interfaces import IUserRepository, IUserService
from .exceptions import UserNotFoundError, DuplicateEmailError, InvalidPasswordError

__all__ = [
    "IUserRepository",
    "IUserService",
    "UserNotFoundError",
    "DuplicateEmailError",
    "InvalidPasswordError",
]
