"""Order schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from menugen.models.enums import OrderStatus
from menugen.schemas.common import MAX_ID

MAX_QUANTITY = 1000


class OrderItemCreate(BaseModel):
    """A dish and quantity requested in a new order."""

    dish_id: int = Field(..., gt=0, le=MAX_ID)
    quantity: int = Field(1, gt=0, le=MAX_QUANTITY)


class OrderCreate(BaseModel):
    """Place a new order."""

    restaurant_id: int | None = Field(None, gt=0, le=MAX_ID)
    items: list[OrderItemCreate] = []


class OrderStatusUpdate(BaseModel):
    """Change the status of an order."""

    status: str


class OrderItemResponse(BaseModel):
    """Order line item with its snapshot price."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    order_id: int
    dish_id: int
    dish_name: str
    quantity: int
    price: float


class OrderSummary(BaseModel):
    """Order without its items, as shown in order lists."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    restaurant_id: int
    restaurant_name: str
    status: OrderStatus
    total: float
    created_at: datetime


class OrderResponse(OrderSummary):
    """Order with its expanded items."""

    items: list[OrderItemResponse]


class OrderStatusResponse(BaseModel):
    id: int
    status: OrderStatus
