"""Order service: placement transaction and status management."""

import logging
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from menugen.errors import AuthorizationError, NotFoundError, UnavailableError, ValidationError
from menugen.models.enums import OrderStatus
from menugen.models.order import Order, OrderItem
from menugen.models.restaurant import Dish, Restaurant
from menugen.schemas.order import OrderItemCreate

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
MAX_ORDER_TOTAL = Decimal("99999999.99")


def to_money(value) -> Decimal:
    """Convert a price-like value to a Decimal rounded half away from zero to cents."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


class OrderService:
    """Service for order-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def place_order(
        self,
        customer_id: int,
        restaurant_id: int | None,
        items: Sequence[OrderItemCreate],
    ) -> Order:
        """Validate and persist an order with its line items.

        The order row and all item rows are committed together; any failure
        before or during the commit leaves no order behind.
        """
        if not restaurant_id or not items:
            raise ValidationError("Restaurant and items are required")
        if any(item.quantity < 1 for item in items):
            raise ValidationError("Quantity must be at least 1")

        restaurant = self.db.query(Restaurant).filter(Restaurant.id == restaurant_id).first()
        if not restaurant:
            raise NotFoundError("Restaurant not found")

        # One lookup for every referenced dish, scoped to this restaurant
        dish_ids = {item.dish_id for item in items}
        dishes = (
            self.db.query(Dish)
            .filter(Dish.id.in_(dish_ids), Dish.restaurant_id == restaurant_id)
            .all()
        )
        dish_map = {dish.id: dish for dish in dishes}

        for item in items:
            dish = dish_map.get(item.dish_id)
            if dish is None:
                raise NotFoundError(f"Dish {item.dish_id} not found in this restaurant")
            if not dish.available:
                raise UnavailableError(f"{dish.name} is not available")

        total = to_money(
            sum(
                (Decimal(str(dish_map[item.dish_id].price)) * item.quantity for item in items),
                Decimal("0"),
            )
        )
        if total > MAX_ORDER_TOTAL:
            raise ValidationError("Order total is too large")

        order = Order(
            user_id=customer_id,
            restaurant_id=restaurant_id,
            status=OrderStatus.PENDING,
            total=total,
            items=[
                OrderItem(
                    dish_id=item.dish_id,
                    quantity=item.quantity,
                    price=to_money(dish_map[item.dish_id].price),
                )
                for item in items
            ],
        )
        self.db.add(order)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to store order for user {customer_id}: {e}")
            raise
        self.db.refresh(order)

        logger.info(
            f"Order {order.id} placed by user {customer_id} at restaurant {restaurant_id} "
            f"({len(items)} items, total {total})"
        )
        return order

    def update_order_status(self, acting_user_id: int, order_id: int, new_status: str) -> Order:
        """Set an order's status. Only the restaurant owner may do this.

        Any enumerated status may follow any other.
        """
        try:
            status = OrderStatus(new_status)
        except ValueError:
            raise ValidationError("Invalid status") from None

        row = (
            self.db.query(Order, Restaurant.owner_id)
            .join(Restaurant, Restaurant.id == Order.restaurant_id)
            .filter(Order.id == order_id)
            .first()
        )
        if row is None:
            raise NotFoundError("Order not found")

        order, owner_id = row
        if owner_id != acting_user_id:
            logger.warning(
                f"User {acting_user_id} tried to change status of order {order_id} "
                f"owned by restaurant {order.restaurant_id}"
            )
            raise AuthorizationError()

        previous = order.status
        order.status = status
        self.db.commit()
        self.db.refresh(order)
        logger.info(f"Order {order_id} status changed from {previous.value} to {status.value}")
        return order

    def list_customer_orders(self, user_id: int) -> list[Order]:
        """Get all orders placed by a customer, newest first."""
        return (
            self.db.query(Order)
            .filter(Order.user_id == user_id)
            .order_by(Order.created_at.desc(), Order.id.desc())
            .all()
        )

    def get_customer_order(self, user_id: int, order_id: int) -> Order:
        """Get one of the customer's own orders."""
        order = self.db.query(Order).filter(Order.id == order_id, Order.user_id == user_id).first()
        if order is None:
            raise NotFoundError("Order not found")
        return order

    def list_restaurant_orders(self, acting_user_id: int, restaurant_id: int) -> list[Order]:
        """Get the order board of a restaurant for its owner, newest first."""
        restaurant = self.db.query(Restaurant).filter(Restaurant.id == restaurant_id).first()
        if restaurant is None:
            raise NotFoundError("Restaurant not found")
        if restaurant.owner_id != acting_user_id:
            raise AuthorizationError()

        return (
            self.db.query(Order)
            .filter(Order.restaurant_id == restaurant_id)
            .order_by(Order.created_at.desc(), Order.id.desc())
            .all()
        )
