"""Pydantic schemas for API requests and responses."""

from menugen.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from menugen.schemas.common import DeletedResponse, Envelope
from menugen.schemas.order import (
    OrderCreate,
    OrderItemCreate,
    OrderItemResponse,
    OrderResponse,
    OrderStatusResponse,
    OrderStatusUpdate,
    OrderSummary,
)
from menugen.schemas.restaurant import (
    DishCreate,
    DishResponse,
    DishUpdate,
    RestaurantCreate,
    RestaurantDetailResponse,
    RestaurantResponse,
    RestaurantUpdate,
)

__all__ = [
    "Envelope",
    "DeletedResponse",
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "RestaurantCreate",
    "RestaurantUpdate",
    "RestaurantResponse",
    "RestaurantDetailResponse",
    "DishCreate",
    "DishUpdate",
    "DishResponse",
    "OrderCreate",
    "OrderItemCreate",
    "OrderStatusUpdate",
    "OrderItemResponse",
    "OrderSummary",
    "OrderResponse",
    "OrderStatusResponse",
]
