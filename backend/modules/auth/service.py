"""
Authentication service implementation.

Owns the session lifecycle: registration/activation, login, social login,
logout, access-token resolution and refresh-token rotation. Identity records
come from the credential store; sessions live in the session cache.
"""

import logging
import secrets
from typing import Optional

from shared.config import Settings
from shared.models import Avatar, User
from modules.users.exceptions import DuplicateEmailError
from modules.users.interfaces import IUserRepository

from .exceptions import (
    InvalidActivationCodeError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotAuthenticatedError,
    SessionNotFoundError,
)
from .interfaces import IAuthService
from .mailer import IActivationMailer, redact_email
from .models import ActivationToken, AuthSession, PendingUser, TokenPair
from .passwords import hash_password, verify_password
from .session_cache import SessionCache
from .tokens import TokenIssuer

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    No locks are taken: concurrent flows for the same identity overwrite the
    session entry last-writer-wins.
    """

    def __init__(
        self,
        settings: Settings,
        users: IUserRepository,
        sessions: SessionCache,
        mailer: IActivationMailer,
        tokens: Optional[TokenIssuer] = None,
    ):
        self._settings = settings
        self._users = users
        self._sessions = sessions
        self._mailer = mailer
        self._tokens = tokens or TokenIssuer(settings)

    @property
    def tokens(self) -> TokenIssuer:
        return self._tokens

    # -------------------------------------------------------------------------
    # Registration / activation
    # -------------------------------------------------------------------------

    async def register(self, name: str, email: str, password: str) -> ActivationToken:
        if self._users.email_exists(email):
            raise DuplicateEmailError()

        pending = PendingUser(name=name, email=email, password=hash_password(password))
        activation = self._tokens.issue_activation_token(pending)
        await self._mailer.send_activation_code(email, name, activation.activation_code)

        logger.info(f"Issued activation token for {redact_email(email)}")
        return activation

    async def activate(self, activation_token: str, activation_code: str) -> User:
        payload = self._tokens.verify_activation_token(activation_token)

        # Compare as bytes; compare_digest rejects non-ASCII str
        if not secrets.compare_digest(
            payload.activation_code.encode(), activation_code.encode()
        ):
            raise InvalidActivationCodeError()

        pending = payload.user
        if self._users.email_exists(pending.email):
            raise DuplicateEmailError()

        # The store's unique index rejects a concurrent activation of the same email
        user = self._users.create(
            {
                "name": pending.name,
                "email": pending.email,
                "password": pending.password,
                "is_verified": True,
            }
        )
        logger.info(f"Activated account {user.id}")
        return user

    # -------------------------------------------------------------------------
    # Session establishment
    # -------------------------------------------------------------------------

    async def login(self, email: str, password: str) -> AuthSession:
        user = self._users.get_by_email(email, include_password=True)
        if user is None or not verify_password(user.password, password):
            logger.warning(f"Failed login for {redact_email(email)}")
            raise InvalidCredentialsError()

        logger.info(f"User {user.id} logged in")
        return await self._open_session(user)

    async def social_auth(
        self, email: str, name: str, avatar: Optional[Avatar] = None
    ) -> AuthSession:
        user = self._users.get_by_email(email, include_password=True)
        if user is None:
            data = {"name": name, "email": email, "is_verified": True}
            if avatar is not None:
                data["avatar"] = avatar.model_dump()
            user = self._users.create(data)
            logger.info(f"Created account {user.id} from social login")

        logger.info(f"User {user.id} logged in via social provider")
        return await self._open_session(user)

    async def logout(self, user_id: str) -> None:
        await self._sessions.delete(user_id)
        logger.info(f"User {user_id} logged out")

    # -------------------------------------------------------------------------
    # Session resolution / rotation
    # -------------------------------------------------------------------------

    async def authenticate(self, access_token: Optional[str]) -> User:
        if not access_token:
            raise NotAuthenticatedError()

        payload = self._tokens.verify_access_token(access_token)

        user = await self._sessions.get(payload.id)
        if user is None:
            logger.warning(f"No session entry for user {payload.id}")
            raise SessionNotFoundError()
        return user

    async def refresh(self, refresh_token: Optional[str]) -> AuthSession:
        # Every failure looks the same so callers cannot probe session existence
        message = "Could not refresh token"
        if not refresh_token:
            raise InvalidTokenError(message)

        try:
            payload = self._tokens.verify_refresh_token(refresh_token)
        except InvalidTokenError:
            raise InvalidTokenError(message)

        user = await self._sessions.get(payload.id)
        if user is None:
            raise InvalidTokenError(message)

        logger.info(f"Refreshed tokens for user {user.id}")
        return await self._open_session(user)

    async def _open_session(self, user: User) -> AuthSession:
        """Issue a token pair and overwrite the session snapshot."""
        tokens = TokenPair(
            access_token=self._tokens.issue_access_token(user.id),
            refresh_token=self._tokens.issue_refresh_token(user.id),
        )
        await self._sessions.set(user)
        return AuthSession(user=user, tokens=tokens)
