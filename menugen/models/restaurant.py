"""Restaurant and Dish models."""

from sqlalchemy import Boolean, CheckConstraint, Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from menugen.database import Base
from menugen.models.mixins import TimestampMixin


class Restaurant(Base, TimestampMixin):
    """Restaurant owned by a user."""

    __tablename__ = "restaurants"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    address = Column(String(500), nullable=False, default="")

    # Relationships
    owner = relationship("User", backref="restaurants")
    dishes = relationship("Dish", back_populates="restaurant", cascade="all, delete-orphan")


class Dish(Base, TimestampMixin):
    """Menu entry of a restaurant."""

    __tablename__ = "dishes"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_dishes_price_non_negative"),)

    id = Column(Integer, primary_key=True, index=True)
    restaurant_id = Column(Integer, ForeignKey("restaurants.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(String(100), nullable=False, default="Main")
    available = Column(Boolean, nullable=False, default=True)

    # Relationships
    restaurant = relationship("Restaurant", back_populates="dishes")
