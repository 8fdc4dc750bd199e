"""
Order repository for database access.

Encapsulates Supabase queries for the ``orders`` table.
"""

from typing import Any

from supabase import PostgrestAPIError

from shared.repository import BaseRepository
from .exceptions import CourseAlreadyPurchasedError
from .models import Order


class OrderRepository(BaseRepository[Order]):
    """Repository for course orders."""

    table = "orders"

    def create(self, data: dict[str, Any]) -> Order:
        """
        Insert an order row.

        Raises:
            CourseAlreadyPurchasedError: If the user already has an order
                for this course.
        """
        try:
            result = self._query().insert(data).execute()
        except PostgrestAPIError as e:
            if self._is_unique_violation(e):
                raise CourseAlreadyPurchasedError(data["course_id"])
            raise
        return self._map_to_order(result.data[0])

    def _map_to_order(self, row: dict[str, Any]) -> Order:
        return Order(
            **{
                **row,
                "id": str(row["id"]),
                "course_id": str(row["course_id"]),
                "user_id": str(row["user_id"]),
            }
        )
