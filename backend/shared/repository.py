"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from typing import Any, Generic, Optional, TypeVar
from supabase import Client, PostgrestAPIError


T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - Helpers for reading single rows and classifying store errors

    Subclasses set ``table`` and handle dict-to-Pydantic model mapping
    internally.

    Example:
        class CourseRepository(BaseRepository[Course]):
            table = "courses"

            def get_by_id(self, course_id: str) -> Optional[Course]:
                row = self._first(self._query().select("*").eq("id", course_id).execute())
                return Course(**row) if row else None
    """

    table: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _query(self):
        """Start a query builder on this repository's table."""
        return self._db.table(self.table)

    @staticmethod
    def _first(result: Any) -> Optional[dict[str, Any]]:
        """Return the first row of a query result, or None."""
        if not result.data:
            return None
        return result.data[0]

    @staticmethod
    def _is_unique_violation(error: PostgrestAPIError) -> bool:
        """Whether a store error was raised by a unique constraint."""
        return getattr(error, "code", None) == UNIQUE_VIOLATION
