"""
Authentication endpoints.

Registration/activation, login (password and social), logout and token
refresh. Tokens are returned in cookies; the access token is also echoed in
the response body.
"""

from fastapi import APIRouter, Depends, Response

from shared.config import Settings
from shared.models import User
from modules.auth.interfaces import IAuthService
from modules.auth.models import (
    ActivationRequest,
    AuthSession,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    RefreshResponse,
    RegistrationRequest,
    RegistrationResponse,
    SocialAuthRequest,
    SuccessResponse,
)

from ..cookies import clear_token_cookies, set_token_cookies
from ..dependencies import get_app_settings, get_auth_service
from ..middleware.auth import get_current_user, refresh_session

router = APIRouter()


def _session_response(
    session: AuthSession, response: Response, settings: Settings
) -> LoginResponse:
    set_token_cookies(response, session.tokens, settings)
    return LoginResponse(
        user=session.user.to_public(),
        access_token=session.tokens.access_token,
    )


@router.post("/registration", response_model=RegistrationResponse, status_code=201)
async def register(
    request: RegistrationRequest,
    auth: IAuthService = Depends(get_auth_service),
) -> RegistrationResponse:
    """
    Start registration.

    Nothing is persisted yet: the pending account lives inside the returned
    activation token, and the code is mailed to the given address.
    """
    activation = await auth.register(request.name, request.email, request.password)
    return RegistrationResponse(
        message=f"Please check your email: {request.email} to activate your account",
        activation_token=activation.token,
    )


@router.post("/activate-user", response_model=SuccessResponse, status_code=201)
async def activate_user(
    request: ActivationRequest,
    auth: IAuthService = Depends(get_auth_service),
) -> SuccessResponse:
    """Persist the account carried by an activation token."""
    await auth.activate(request.activation_token, request.activation_code)
    return SuccessResponse()


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    auth: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_app_settings),
) -> LoginResponse:
    session = await auth.login(request.email, request.password)
    return _session_response(session, response, settings)


@router.post("/social-auth", response_model=LoginResponse)
async def social_auth(
    request: SocialAuthRequest,
    response: Response,
    auth: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_app_settings),
) -> LoginResponse:
    session = await auth.social_auth(request.email, request.name, request.avatar)
    return _session_response(session, response, settings)


@router.get("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    user: User = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_app_settings),
) -> LogoutResponse:
    """Expire both cookies and drop the session entry."""
    await auth.logout(user.id)
    clear_token_cookies(response, settings)
    return LogoutResponse()


@router.get("/refresh", response_model=RefreshResponse)
async def refresh(session: AuthSession = Depends(refresh_session)) -> RefreshResponse:
    """
    Rotate the token pair using the refresh cookie.

    The new refresh token is only sent as a cookie.
    """
    return RefreshResponse(access_token=session.tokens.access_token)
