"""
Orders module.

Course purchases: records the order, enrols the buyer and counts the sale.

Public API:
- IOrderService: Order creation
- Orders exceptions: CourseAlreadyPurchasedError
"""

from .interfaces import IOrderService
from .exceptions import CourseAlreadyPurchasedError

__all__ = [
    "IOrderService",
    "CourseAlreadyPurchasedError",
]
