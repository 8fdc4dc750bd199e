"""
Orders module data models.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class Order(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    course_id: str
    user_id: str
    payment_info: Optional[dict[str, Any]] = None
    created_at: Optional[datetime] = None


class OrderCreateRequest(BaseModel):
    """
    Order body as sent by the storefront.

    ``payment_info`` is whatever the payment provider returned; it is stored
    as-is and not checked here.
    """

    model_config = ConfigDict(populate_by_name=True)

    course_id: str = Field(..., min_length=1, alias="courseId")
    payment_info: Optional[dict[str, Any]] = None


class OrderResponse(BaseModel):
    success: bool = True
    order: Order
