"""SQLAlchemy models."""

from menugen.models.order import Order, OrderItem
from menugen.models.restaurant import Dish, Restaurant
from menugen.models.user import User

__all__ = [
    "User",
    "Restaurant",
    "Dish",
    "Order",
    "OrderItem",
]
