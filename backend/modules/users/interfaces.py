"""
Users module interfaces.

IUserRepository is the Credential Store port. The auth module depends on it
for registration, activation and login; the users service depends on it for
profile and admin operations.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from shared.models import Avatar, User, UserRole


@runtime_checkable
class IUserRepository(Protocol):
    """
    Persistence contract for identity records.

    Email uniqueness is enforced by the store; ``create`` and ``update``
    raise DuplicateEmailError when the constraint fires.
    """

    def get_by_id(self, user_id: str, include_password: bool = False) -> Optional[User]:
        ...

    def get_by_email(self, email: str, include_password: bool = False) -> Optional[User]:
        """
        Look up an identity by email.

        The password hash is withheld unless ``include_password`` is set,
        which only the login and password-change paths do.
        """
        ...

    def email_exists(self, email: str) -> bool:
        ...

    def create(self, data: dict[str, Any]) -> User:
        ...

    def update(self, user_id: str, data: dict[str, Any]) -> User:
        ...

    def list_all(self) -> list[User]:
        ...

    def delete(self, user_id: str) -> bool:
        ...


@runtime_checkable
class IUserService(Protocol):
    """Profile and admin operations on identity records."""

    async def get_user_info(self, user_id: str) -> User:
        """
        Get a user from the session cache.

        Raises:
            UserNotFoundError: If no session entry exists
        """
        ...

    async def update_user_info(
        self, user: User, name: Optional[str] = None, email: Optional[str] = None
    ) -> User:
        ...

    async def update_password(self, user: User, old_password: str, new_password: str) -> User:
        ...

    async def update_avatar(self, user: User, avatar: Avatar) -> User:
        ...

    async def list_users(self) -> list[User]:
        ...

    async def update_user_role(self, user_id: str, role: UserRole) -> User:
        ...

    async def delete_user(self, user_id: str) -> None:
        ...
