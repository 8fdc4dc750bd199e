"""
Order endpoints.
"""

from fastapi import APIRouter, Depends

from shared.models import User
from modules.orders.interfaces import IOrderService
from modules.orders.models import OrderCreateRequest, OrderResponse

from ..dependencies import get_order_service
from ..middleware.auth import get_current_user

router = APIRouter()


@router.post("/create-order", response_model=OrderResponse, status_code=201)
async def create_order(
    request: OrderCreateRequest,
    user: User = Depends(get_current_user),
    service: IOrderService = Depends(get_order_service),
) -> OrderResponse:
    """Buy a course; the caller is enrolled on success."""
    order = await service.create_order(user, request.course_id, request.payment_info)
    return OrderResponse(order=order)
