"""
Users module data models.

Request and response bodies for profile and admin operations. The identity
record itself is shared.models.User.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from shared.models import Avatar, UserPublic, UserRole


class UpdateUserInfoRequest(BaseModel):
    """Profile fields a user can change on their own account."""

    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None


class UpdatePasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    old_password: str = Field(..., alias="oldPassword")
    new_password: str = Field(..., min_length=6, alias="newPassword")


class UpdateAvatarRequest(BaseModel):
    """Avatar reference returned by the image host after upload."""

    avatar: Avatar


class UpdateUserRoleRequest(BaseModel):
    id: str
    role: UserRole


class UserResponse(BaseModel):
    success: bool = True
    user: UserPublic


class UserListResponse(BaseModel):
    success: bool = True
    users: list[UserPublic]


class MessageResponse(BaseModel):
    success: bool = True
    message: str
