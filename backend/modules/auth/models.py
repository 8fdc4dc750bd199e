"""
Authentication module data models.

These models define the token payloads, request bodies and responses of
the auth module.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from shared.models import Avatar, User, UserPublic


class TokenPayload(BaseModel):
    """Decoded access or refresh token. Only the identity id is carried."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., description="User ID")
    exp: int = Field(..., description="Expiration timestamp")
    iat: Optional[int] = Field(None, description="Issued at timestamp")


class PendingUser(BaseModel):
    """Identity waiting for activation. ``password`` is already hashed."""

    name: str
    email: EmailStr
    password: str


class ActivationPayload(BaseModel):
    """Decoded activation token."""

    model_config = ConfigDict(extra="ignore")

    user: PendingUser
    activation_code: str


class ActivationToken(BaseModel):
    """Signed activation token plus the code to deliver out-of-band."""

    token: str
    activation_code: str


class TokenPair(BaseModel):
    access_token: str
    refresh_token: str


class AuthSession(BaseModel):
    """Result of a flow that (re)establishes a session."""

    user: User
    tokens: TokenPair


# -----------------------------------------------------------------------------
# Request bodies
# -----------------------------------------------------------------------------


class RegistrationRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6)


class ActivationRequest(BaseModel):
    activation_token: str
    activation_code: str


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class SocialAuthRequest(BaseModel):
    email: EmailStr
    name: str = Field(..., min_length=1)
    avatar: Optional[Avatar] = None


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------


class RegistrationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    activation_token: str = Field(..., alias="activationToken")


class SuccessResponse(BaseModel):
    success: bool = True


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    user: UserPublic
    access_token: str = Field(..., alias="accessToken")


class LogoutResponse(BaseModel):
    success: bool = True
    message: str = "Logged out successfully"


class RefreshResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "success"
    access_token: str = Field(..., alias="accessToken")
