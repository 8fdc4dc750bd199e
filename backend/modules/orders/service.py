"""
Orders service implementation.
"""

import logging
from typing import Any, Optional

from shared.models import User
from modules.auth.session_cache import SessionCache
from modules.courses.interfaces import ICourseService
from modules.users.exceptions import UserNotFoundError
from modules.users.interfaces import IUserRepository

from .exceptions import CourseAlreadyPurchasedError
from .interfaces import IOrderService
from .models import Order
from .repository import OrderRepository

logger = logging.getLogger(__name__)


class OrderService(IOrderService):
    """
    Creates orders and enrols the buyer.

    The store row is the source of the enrolled-course list; the caller's
    session snapshot may lag behind a purchase made from another session.
    """

    def __init__(
        self,
        orders: OrderRepository,
        users: IUserRepository,
        sessions: SessionCache,
        courses: ICourseService,
    ):
        self._orders = orders
        self._users = users
        self._sessions = sessions
        self._courses = courses

    async def create_order(
        self, user: User, course_id: str, payment_info: Optional[dict[str, Any]] = None
    ) -> Order:
        stored = self._users.get_by_id(user.id)
        if stored is None:
            raise UserNotFoundError(user.id)
        if stored.is_enrolled(course_id):
            raise CourseAlreadyPurchasedError(course_id)

        course = await self._courses.get_course(course_id)

        order = self._orders.create(
            {"course_id": course.id, "user_id": user.id, "payment_info": payment_info}
        )

        enrolled = [c.model_dump(by_alias=True) for c in stored.courses]
        enrolled.append({"courseId": course.id})
        updated = self._users.update(user.id, {"courses": enrolled})
        await self._sessions.set(updated.model_copy(update={"password": user.password}))

        await self._courses.record_purchase(course.id)

        logger.info(f"User {user.id} purchased course {course.id} (order {order.id})")
        return order
