"""
Token issuing and verification.

Three token classes share one HS256 signing primitive, each with its own
secret and lifetime:
- activation: binds a pending identity to a 4-digit code (5 minutes)
- access: short-lived proof of a session
- refresh: longer-lived credential used only to mint new pairs

Tokens are stateless. Revocation happens by deleting the session cache entry.
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from shared.config import Settings
from shared.exceptions import ConfigurationError

from .exceptions import ExpiredTokenError, InvalidTokenError
from .models import ActivationPayload, ActivationToken, PendingUser, TokenPayload


ALGORITHM = "HS256"


def generate_activation_code() -> str:
    """Draw a code uniformly from [1000, 9999]."""
    return str(1000 + secrets.randbelow(9000))


class TokenIssuer:
    """Creates and verifies activation, access and refresh tokens."""

    def __init__(self, settings: Settings):
        self._settings = settings

    # -------------------------------------------------------------------------
    # Activation
    # -------------------------------------------------------------------------

    def issue_activation_token(self, pending: PendingUser) -> ActivationToken:
        """
        Sign a pending identity together with a fresh activation code.

        The caller delivers the code by email and hands the token to the
        client; nothing is persisted.
        """
        code = generate_activation_code()
        token = self._sign(
            {"user": pending.model_dump(), "activation_code": code},
            self._settings.activation_secret,
            self._settings.activation_token_expire,
        )
        return ActivationToken(token=token, activation_code=code)

    def verify_activation_token(self, token: str) -> ActivationPayload:
        claims = self.verify(token, self._settings.activation_secret)
        try:
            return ActivationPayload(**claims)
        except ValueError:
            raise InvalidTokenError("Invalid activation token")

    # -------------------------------------------------------------------------
    # Access / refresh
    # -------------------------------------------------------------------------

    def issue_access_token(self, user_id: str) -> str:
        return self._sign(
            {"id": user_id},
            self._settings.access_token_secret,
            self._settings.access_token_expire,
        )

    def issue_refresh_token(self, user_id: str) -> str:
        return self._sign(
            {"id": user_id},
            self._settings.refresh_token_secret,
            self._settings.refresh_token_expire,
        )

    def verify_access_token(self, token: str) -> TokenPayload:
        return self._to_payload(self.verify(token, self._settings.access_token_secret))

    def verify_refresh_token(self, token: str) -> TokenPayload:
        return self._to_payload(self.verify(token, self._settings.refresh_token_secret))

    # -------------------------------------------------------------------------
    # Signing primitive
    # -------------------------------------------------------------------------

    def verify(self, token: str, secret: str) -> dict[str, Any]:
        """
        Verify a token's signature and expiry and return its claims.

        Raises:
            ExpiredTokenError: Signature is valid but ``exp`` has passed
            InvalidTokenError: Anything else (bad signature, malformed)
        """
        self._require_secret(secret)
        try:
            return jwt.decode(
                token,
                secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

    def _sign(self, claims: dict[str, Any], secret: str, expires_in: int) -> str:
        self._require_secret(secret)
        now = datetime.now(timezone.utc)
        payload = {
            **claims,
            "iat": now,
            "exp": now + timedelta(seconds=expires_in),
        }
        return jwt.encode(payload, secret, algorithm=ALGORITHM)

    @staticmethod
    def _to_payload(claims: dict[str, Any]) -> TokenPayload:
        if not claims.get("id"):
            raise InvalidTokenError("Token payload is missing the user id")
        try:
            return TokenPayload(**claims)
        except ValueError:
            raise InvalidTokenError("Invalid token payload")

    @staticmethod
    def _require_secret(secret: str) -> None:
        if not secret:
            raise ConfigurationError(
                "Server authentication not configured",
                code="AUTH_NOT_CONFIGURED",
            )
