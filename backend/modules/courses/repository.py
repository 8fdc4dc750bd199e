"""
Course repository for database access.

Encapsulates all Supabase queries and data mapping for the ``courses`` table.
Lessons are stored in the ``course_data`` JSON column.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Course


class CourseRepository(BaseRepository[Course]):
    """Repository for course catalog data."""

    table = "courses"

    def get_by_id(self, course_id: str) -> Optional[Course]:
        row = self._first(self._query().select("*").eq("id", course_id).execute())
        return self._map_to_course(row) if row else None

    def list_all(self) -> list[Course]:
        result = self._query().select("*").order("created_at", desc=True).execute()
        return [self._map_to_course(row) for row in result.data or []]

    def create(self, data: dict[str, Any]) -> Course:
        result = self._query().insert(data).execute()
        return self._map_to_course(result.data[0])

    def update(self, course_id: str, data: dict[str, Any]) -> Optional[Course]:
        """Update a course; returns None if it does not exist."""
        data = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        row = self._first(self._query().update(data).eq("id", course_id).execute())
        return self._map_to_course(row) if row else None

    def delete(self, course_id: str) -> bool:
        result = self._query().delete().eq("id", course_id).execute()
        return bool(result.data)

    def _map_to_course(self, row: dict[str, Any]) -> Course:
        return Course(**{**row, "id": str(row["id"])})
