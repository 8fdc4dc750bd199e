"""
Token cookie helpers.

Both tokens travel in httpOnly, SameSite=Lax cookies whose max-age matches
the token lifetime. The refresh cookie is marked secure in production.
"""

from fastapi import Response

from shared.config import Settings
from modules.auth.models import TokenPair

ACCESS_TOKEN_COOKIE = "access_token"
REFRESH_TOKEN_COOKIE = "refresh_token"


def set_token_cookies(response: Response, tokens: TokenPair, settings: Settings) -> None:
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        tokens.access_token,
        max_age=settings.access_token_expire,
        httponly=True,
        samesite="lax",
    )
    response.set_cookie(
        REFRESH_TOKEN_COOKIE,
        tokens.refresh_token,
        max_age=settings.refresh_token_expire,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )


def clear_token_cookies(response: Response, settings: Settings) -> None:
    """Expire both cookies immediately."""
    response.set_cookie(
        ACCESS_TOKEN_COOKIE, "", max_age=0, httponly=True, samesite="lax"
    )
    response.set_cookie(
        REFRESH_TOKEN_COOKIE,
        "",
        max_age=0,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
