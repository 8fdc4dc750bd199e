"""
Orders module interface.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from shared.models import User

from .models import Order


@runtime_checkable
class IOrderService(Protocol):
    async def create_order(
        self, user: User, course_id: str, payment_info: Optional[dict[str, Any]] = None
    ) -> Order:
        """
        Purchase a course for the user.

        The user is enrolled, their session entry is overwritten with the
        new course list, and the course's purchase count goes up by one.

        Raises:
            CourseAlreadyPurchasedError: If the user is already enrolled
            CourseNotFoundError: If the course doesn't exist
        """
        ...
