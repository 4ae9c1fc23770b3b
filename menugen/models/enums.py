"""Enums for model fields."""

from enum import Enum


class OrderStatus(str, Enum):
    """Lifecycle states of an order.

    The usual flow is pending, confirmed, preparing, ready, completed, with
    cancelled possible along the way. Owners may set any state at any time.
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
