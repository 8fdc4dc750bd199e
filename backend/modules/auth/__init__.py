"""
Authentication module.

Handles activation, access and refresh tokens, the session cache and
login/logout flows.

Public API:
- IAuthService: Interface for auth operations
- TokenIssuer: Signs and verifies the three token classes
- SessionCache: Typed port over the key-value cache
- Auth exceptions: NotAuthenticatedError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService
from .models import AuthSession, TokenPair, TokenPayload, ActivationToken
from .session_cache import SessionCache
from .tokens import TokenIssuer
from .exceptions import (
    NotAuthenticatedError,
    InvalidTokenError,
    ExpiredTokenError,
    SessionNotFoundError,
    InvalidCredentialsError,
    ForbiddenError,
    InvalidActivationCodeError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Components
    "TokenIssuer",
    "SessionCache",
    # Models
    "AuthSession",
    "TokenPair",
    "TokenPayload",
    "ActivationToken",
    # Exceptions
    "NotAuthenticatedError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "SessionNotFoundError",
    "InvalidCredentialsError",
    "ForbiddenError",
    "InvalidActivationCodeError",
]
