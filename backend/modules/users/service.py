"""
Users service implementation.

Profile and admin operations on identity records. Every mutation of the
caller's own record is written to the store first and then overwrites the
session snapshot, so the session gate sees the new values immediately.
"""

import logging
from typing import Any, Optional

from shared.models import Avatar, User, UserRole
from modules.auth.passwords import hash_password, verify_password
from modules.auth.session_cache import SessionCache

from .exceptions import DuplicateEmailError, InvalidPasswordError, UserNotFoundError
from .interfaces import IUserRepository, IUserService

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """Users service backed by the credential store and session cache."""

    def __init__(self, users: IUserRepository, sessions: SessionCache):
        self._users = users
        self._sessions = sessions

    async def get_user_info(self, user_id: str) -> User:
        user = await self._sessions.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def update_user_info(
        self, user: User, name: Optional[str] = None, email: Optional[str] = None
    ) -> User:
        changes: dict[str, Any] = {}
        if name:
            changes["name"] = name
        if email and email.lower() != user.email.lower():
            if self._users.email_exists(email):
                raise DuplicateEmailError()
            changes["email"] = email

        if not changes:
            return user

        updated = self._users.update(user.id, changes)
        return await self._refresh_snapshot(updated, user.password)

    async def update_password(self, user: User, old_password: str, new_password: str) -> User:
        stored = self._users.get_by_id(user.id, include_password=True)
        if stored is None:
            raise UserNotFoundError(user.id)
        if not stored.password:
            # Identities created through social login have no password to change
            raise InvalidPasswordError("Password is not set for this account")
        if not verify_password(stored.password, old_password):
            raise InvalidPasswordError()

        new_hash = hash_password(new_password)
        updated = self._users.update(user.id, {"password": new_hash})
        logger.info(f"User {user.id} changed password")
        return await self._refresh_snapshot(updated, new_hash)

    async def update_avatar(self, user: User, avatar: Avatar) -> User:
        updated = self._users.update(user.id, {"avatar": avatar.model_dump()})
        return await self._refresh_snapshot(updated, user.password)

    # -------------------------------------------------------------------------
    # Admin operations
    # -------------------------------------------------------------------------

    async def list_users(self) -> list[User]:
        return self._users.list_all()

    async def update_user_role(self, user_id: str, role: UserRole) -> User:
        updated = self._users.update(user_id, {"role": role.value})

        # Only rewrite a live session; never create one for a logged-out user
        cached = await self._sessions.get(user_id)
        if cached is not None:
            await self._refresh_snapshot(updated, cached.password)

        logger.info(f"User {user_id} role set to {role.value}")
        return updated

    async def delete_user(self, user_id: str) -> None:
        if not self._users.delete(user_id):
            raise UserNotFoundError(user_id)
        await self._sessions.delete(user_id)
        logger.info(f"Deleted user {user_id}")

    async def _refresh_snapshot(self, updated: User, password_hash: Optional[str]) -> User:
        """Overwrite the session entry, keeping the hash the store withheld."""
        snapshot = updated.model_copy(update={"password": password_hash})
        await self._sessions.set(snapshot)
        return snapshot
