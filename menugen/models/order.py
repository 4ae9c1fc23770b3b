"""Order and OrderItem models."""

from sqlalchemy import CheckConstraint, Column, Enum, ForeignKey, Integer, Numeric
from sqlalchemy.orm import relationship

from menugen.database import Base
from menugen.models.enums import OrderStatus
from menugen.models.mixins import TimestampMixin


class Order(Base, TimestampMixin):
    """Order placed by a customer at one restaurant.

    Only ``status`` changes after creation; ``total`` is fixed at placement.
    """

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    restaurant_id = Column(Integer, ForeignKey("restaurants.id"), nullable=False, index=True)
    status = Column(
        Enum(
            OrderStatus,
            name="orderstatus",
            values_callable=lambda x: [e.value for e in x],
        ),
        default=OrderStatus.PENDING,
        nullable=False,
        index=True,
    )
    total = Column(Numeric(10, 2), nullable=False)

    # Relationships
    user = relationship("User", backref="orders")
    restaurant = relationship("Restaurant")
    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")

    @property
    def restaurant_name(self) -> str:
        return self.restaurant.name


class OrderItem(Base):
    """Line item of an order with the dish price captured at order time."""

    __tablename__ = "order_items"
    __table_args__ = (CheckConstraint("quantity > 0", name="ck_order_items_quantity_positive"),)

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    dish_id = Column(Integer, ForeignKey("dishes.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    # Relationships
    order = relationship("Order", back_populates="items")
    dish = relationship("Dish")

    @property
    def dish_name(self) -> str:
        return self.dish.name
