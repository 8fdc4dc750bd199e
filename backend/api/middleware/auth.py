"""
Session gate dependencies.

Reads the access/refresh token cookies, resolves them through the auth
service and hands route handlers a typed User. Errors raised here are
LearnHubError subclasses and are rendered by the API error handler.
"""

from typing import Optional

from fastapi import Depends, Request, Response
from fastapi.security import APIKeyCookie

from shared.config import Settings
from shared.models import User, UserRole
from modules.auth.exceptions import ForbiddenError
from modules.auth.interfaces import IAuthService
from modules.auth.models import AuthSession

from ..cookies import ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE, set_token_cookies
from ..dependencies import get_app_settings, get_auth_service

# Cookie extractors
access_cookie_scheme = APIKeyCookie(name=ACCESS_TOKEN_COOKIE, auto_error=False)
refresh_cookie_scheme = APIKeyCookie(name=REFRESH_TOKEN_COOKIE, auto_error=False)


async def get_current_user(
    request: Request,
    access_token: Optional[str] = Depends(access_cookie_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> User:
    """
    Dependency that requires an authenticated session.

    Usage:
        @router.get("/protected")
        async def protected_route(user: User = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    user = await auth.authenticate(access_token)
    request.state.user = user
    return user


async def refresh_session(
    request: Request,
    response: Response,
    refresh_token: Optional[str] = Depends(refresh_cookie_scheme),
    auth: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_app_settings),
) -> AuthSession:
    """
    Dependency that rotates the token pair from the refresh cookie.

    Sets both cookies on the response and exposes the resolved identity to
    the rest of the request, so routes can declare it instead of the
    access-token gate.
    """
    session = await auth.refresh(refresh_token)
    set_token_cookies(response, session.tokens, settings)
    request.state.user = session.user
    return session


class RequireRoles:
    """
    Role gate composed after the session gate.

    Usage:
        require_admin = RequireRoles(UserRole.ADMIN)

        @router.get("/admin-only")
        async def admin_route(user: User = Depends(require_admin)):
            ...
    """

    def __init__(self, *roles: UserRole):
        self.allowed = frozenset(roles)

    async def __call__(self, user: User = Depends(get_current_user)) -> User:
        if user.role not in self.allowed:
            raise ForbiddenError(user.role.value)
        return user


require_admin = RequireRoles(UserRole.ADMIN)

# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
RequireAdmin = Depends(require_admin)
