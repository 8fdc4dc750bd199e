"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the ``users`` table.
The password hash column is left out of every select unless a caller asks
for it explicitly.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from supabase import PostgrestAPIError

from shared.models import User
from shared.repository import BaseRepository
from .exceptions import DuplicateEmailError, UserNotFoundError


PUBLIC_COLUMNS = "id,name,email,avatar,role,is_verified,courses,created_at,updated_at"
ALL_COLUMNS = f"{PUBLIC_COLUMNS},password"


class UserRepository(BaseRepository[User]):
    """
    Repository for identity records.

    Note: This repository does NOT perform authorization checks.
    The service layer and the API gates are responsible for that.
    """

    table = "users"

    def get_by_id(self, user_id: str, include_password: bool = False) -> Optional[User]:
        result = (
            self._query()
            .select(self._columns(include_password))
            .eq("id", user_id)
            .execute()
        )
        row = self._first(result)
        return self._map_to_user(row) if row else None

    def get_by_email(self, email: str, include_password: bool = False) -> Optional[User]:
        result = (
            self._query()
            .select(self._columns(include_password))
            .eq("email", email.lower())
            .execute()
        )
        row = self._first(result)
        return self._map_to_user(row) if row else None

    def email_exists(self, email: str) -> bool:
        result = self._query().select("id").eq("email", email.lower()).execute()
        return bool(result.data)

    def create(self, data: dict[str, Any]) -> User:
        """
        Insert a new identity record.

        Args:
            data: Column values; ``password`` must already be hashed.

        Raises:
            DuplicateEmailError: If the email is already registered.
        """
        data = {**data, "email": data["email"].lower()}
        try:
            result = self._query().insert(data).execute()
        except PostgrestAPIError as e:
            if self._is_unique_violation(e):
                raise DuplicateEmailError()
            raise
        return self._without_password(result.data[0])

    def update(self, user_id: str, data: dict[str, Any]) -> User:
        """
        Update columns on an identity record and return the new row.

        Raises:
            UserNotFoundError: If no row matched.
            DuplicateEmailError: If the new email is taken.
        """
        data = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        if "email" in data:
            data["email"] = data["email"].lower()
        try:
            result = self._query().update(data).eq("id", user_id).execute()
        except PostgrestAPIError as e:
            if self._is_unique_violation(e):
                raise DuplicateEmailError()
            raise
        row = self._first(result)
        if row is None:
            raise UserNotFoundError(user_id)
        return self._without_password(row)

    def list_all(self) -> list[User]:
        result = (
            self._query()
            .select(PUBLIC_COLUMNS)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_user(row) for row in result.data or []]

    def delete(self, user_id: str) -> bool:
        result = self._query().delete().eq("id", user_id).execute()
        return bool(result.data)

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _columns(include_password: bool) -> str:
        return ALL_COLUMNS if include_password else PUBLIC_COLUMNS

    def _map_to_user(self, row: dict[str, Any]) -> User:
        """Map a ``users`` row to a User, keeping the hash only if selected."""
        return User(
            id=str(row["id"]),
            name=row["name"],
            email=row["email"],
            password=row.get("password"),
            avatar=row.get("avatar"),
            role=row.get("role") or "user",
            is_verified=row.get("is_verified", False),
            courses=row.get("courses") or [],
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )

    def _without_password(self, row: dict[str, Any]) -> User:
        """Map a row returned by a write; writes return every column."""
        return self._map_to_user({**row, "password": None})
