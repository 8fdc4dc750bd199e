"""
Authentication module interface.

Other modules and the API layer should depend on IAuthService, not the
concrete implementation. This enables testing with mocks.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import Avatar, User

from .models import ActivationToken, AuthSession


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for the session and token lifecycle.

    This protocol defines the contract that the auth module exposes
    to the rest of the application.
    """

    async def register(self, name: str, email: str, password: str) -> ActivationToken:
        """
        Start registration without persisting anything.

        Args:
            name: Display name
            email: Email address (must not be registered yet)
            password: Plaintext password, hashed before it is signed

        Returns:
            ActivationToken; the code is also mailed to ``email``

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        ...

    async def activate(self, activation_token: str, activation_code: str) -> User:
        """
        Persist the identity embedded in an activation token.

        Raises:
            InvalidTokenError: Bad signature or expired token
            InvalidActivationCodeError: Code does not match the token
            DuplicateEmailError: Email was registered in the meantime
        """
        ...

    async def login(self, email: str, password: str) -> AuthSession:
        """
        Verify credentials and open a session.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        ...

    async def social_auth(self, email: str, name: str, avatar: Optional[Avatar] = None) -> AuthSession:
        """Open a session for an identity vouched for by a social provider."""
        ...

    async def logout(self, user_id: str) -> None:
        """Drop the session cache entry. Safe to call repeatedly."""
        ...

    async def authenticate(self, access_token: Optional[str]) -> User:
        """
        Resolve an access token to the cached identity.

        Raises:
            NotAuthenticatedError: No token
            InvalidTokenError: Bad signature or malformed token
            ExpiredTokenError: Token expired
            SessionNotFoundError: No session cache entry for the token's id
        """
        ...

    async def refresh(self, refresh_token: Optional[str]) -> AuthSession:
        """
        Exchange a cache-backed refresh token for a new token pair.

        Raises:
            InvalidTokenError: For every failure, including a cache miss
        """
        ...
