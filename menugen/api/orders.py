"""Order API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from menugen.api.dependencies import CurrentUserId, ResourceId, get_order_service
from menugen.schemas.common import Envelope
from menugen.schemas.order import (
    OrderCreate,
    OrderResponse,
    OrderStatusResponse,
    OrderStatusUpdate,
    OrderSummary,
)
from menugen.services.orders import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", response_model=Envelope[OrderResponse], status_code=status.HTTP_201_CREATED)
def place_order(
    order_data: OrderCreate,
    user_id: CurrentUserId,
    service: Annotated[OrderService, Depends(get_order_service)],
):
    """Place an order at a restaurant."""
    order = service.place_order(user_id, order_data.restaurant_id, order_data.items)
    return Envelope(data=OrderResponse.model_validate(order))


@router.get("", response_model=Envelope[list[OrderSummary]])
def get_my_orders(
    user_id: CurrentUserId,
    service: Annotated[OrderService, Depends(get_order_service)],
):
    """Get the current user's orders, newest first."""
    orders = service.list_customer_orders(user_id)
    return Envelope(data=[OrderSummary.model_validate(o) for o in orders])


@router.get("/restaurant/{restaurant_id}", response_model=Envelope[list[OrderResponse]])
def get_restaurant_orders(
    restaurant_id: ResourceId,
    user_id: CurrentUserId,
    service: Annotated[OrderService, Depends(get_order_service)],
):
    """Get the orders of a restaurant owned by the current user."""
    orders = service.list_restaurant_orders(user_id, restaurant_id)
    return Envelope(data=[OrderResponse.model_validate(o) for o in orders])


@router.get("/{order_id}", response_model=Envelope[OrderResponse])
def get_order(
    order_id: ResourceId,
    user_id: CurrentUserId,
    service: Annotated[OrderService, Depends(get_order_service)],
):
    """Get one of the current user's orders with its items."""
    order = service.get_customer_order(user_id, order_id)
    return Envelope(data=OrderResponse.model_validate(order))


@router.patch("/{order_id}/status", response_model=Envelope[OrderStatusResponse])
def update_order_status(
    order_id: ResourceId,
    status_data: OrderStatusUpdate,
    user_id: CurrentUserId,
    service: Annotated[OrderService, Depends(get_order_service)],
):
    """Change an order's status (restaurant owner only)."""
    order = service.update_order_status(user_id, order_id, status_data.status)
    return Envelope(data=OrderStatusResponse(id=order.id, status=order.status))
