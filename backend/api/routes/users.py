"""
User-related endpoints.

Profile endpoints for the signed-in user plus admin-only account
management.
"""

from fastapi import APIRouter, Depends

from shared.models import User
from modules.users.interfaces import IUserService
from modules.users.models import (
    MessageResponse,
    UpdateAvatarRequest,
    UpdatePasswordRequest,
    UpdateUserInfoRequest,
    UpdateUserRoleRequest,
    UserListResponse,
    UserResponse,
)

from ..dependencies import get_user_service
from ..middleware.auth import get_current_user, require_admin

router = APIRouter()


@router.get("/me", response_model=UserResponse)
async def get_current_user_profile(
    user: User = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """
    Get the current user's profile.

    Served from the session cache.
    """
    info = await service.get_user_info(user.id)
    return UserResponse(user=info.to_public())


@router.put("/update-user-info", response_model=UserResponse)
async def update_user_info(
    request: UpdateUserInfoRequest,
    user: User = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    updated = await service.update_user_info(user, name=request.name, email=request.email)
    return UserResponse(user=updated.to_public())


@router.put("/update-user-password", response_model=UserResponse)
async def update_user_password(
    request: UpdatePasswordRequest,
    user: User = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    updated = await service.update_password(user, request.old_password, request.new_password)
    return UserResponse(user=updated.to_public())


@router.put("/update-user-avatar", response_model=UserResponse)
async def update_user_avatar(
    request: UpdateAvatarRequest,
    user: User = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """Store an avatar reference returned by the image host."""
    updated = await service.update_avatar(user, request.avatar)
    return UserResponse(user=updated.to_public())


# -----------------------------------------------------------------------------
# Admin
# -----------------------------------------------------------------------------


@router.get("/get-users", response_model=UserListResponse)
async def get_all_users(
    admin: User = Depends(require_admin),
    service: IUserService = Depends(get_user_service),
) -> UserListResponse:
    users = await service.list_users()
    return UserListResponse(users=[u.to_public() for u in users])


@router.put("/update-user-role", response_model=UserResponse)
async def update_user_role(
    request: UpdateUserRoleRequest,
    admin: User = Depends(require_admin),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    updated = await service.update_user_role(request.id, request.role)
    return UserResponse(user=updated.to_public())


@router.delete("/delete-user/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    admin: User = Depends(require_admin),
    service: IUserService = Depends(get_user_service),
) -> MessageResponse:
    await service.delete_user(user_id)
    return MessageResponse(message="User deleted successfully")
