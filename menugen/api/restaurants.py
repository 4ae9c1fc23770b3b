"""Restaurant API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from menugen.api.dependencies import CurrentUserId, ResourceId, get_owned_restaurant
from menugen.database import get_db
from menugen.errors import ConflictError, NotFoundError
from menugen.models.order import Order
from menugen.models.restaurant import Dish, Restaurant
from menugen.schemas.common import DeletedResponse, Envelope
from menugen.schemas.restaurant import (
    DishResponse,
    RestaurantCreate,
    RestaurantDetailResponse,
    RestaurantResponse,
    RestaurantUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/restaurants", tags=["restaurants"])
owner_router = APIRouter(prefix="/api/my/restaurants", tags=["my restaurants"])


@router.get("", response_model=Envelope[list[RestaurantResponse]])
def get_restaurants(db: Annotated[Session, Depends(get_db)]):
    """Get all restaurants, newest first."""
    restaurants = (
        db.query(Restaurant).order_by(Restaurant.created_at.desc(), Restaurant.id.desc()).all()
    )
    return Envelope(data=[RestaurantResponse.model_validate(r) for r in restaurants])


@router.get("/{restaurant_id}", response_model=Envelope[RestaurantDetailResponse])
def get_restaurant(restaurant_id: ResourceId, db: Annotated[Session, Depends(get_db)]):
    """Get a restaurant with its menu."""
    restaurant = db.query(Restaurant).filter(Restaurant.id == restaurant_id).first()
    if not restaurant:
        raise NotFoundError("Restaurant not found")

    dishes = (
        db.query(Dish)
        .filter(Dish.restaurant_id == restaurant_id)
        .order_by(Dish.category, Dish.name)
        .all()
    )

    detail = RestaurantDetailResponse.model_validate(restaurant)
    detail.dishes = [DishResponse.model_validate(d) for d in dishes]
    return Envelope(data=detail)


@owner_router.get("", response_model=Envelope[list[RestaurantResponse]])
def get_my_restaurants(user_id: CurrentUserId, db: Annotated[Session, Depends(get_db)]):
    """Get the restaurants owned by the current user."""
    restaurants = (
        db.query(Restaurant)
        .filter(Restaurant.owner_id == user_id)
        .order_by(Restaurant.created_at.desc(), Restaurant.id.desc())
        .all()
    )
    return Envelope(data=[RestaurantResponse.model_validate(r) for r in restaurants])


@owner_router.post(
    "", response_model=Envelope[RestaurantResponse], status_code=status.HTTP_201_CREATED
)
def create_restaurant(
    restaurant_data: RestaurantCreate,
    user_id: CurrentUserId,
    db: Annotated[Session, Depends(get_db)],
):
    """Create a restaurant owned by the current user."""
    restaurant = Restaurant(
        owner_id=user_id,
        name=restaurant_data.name,
        description=restaurant_data.description,
        address=restaurant_data.address,
    )
    db.add(restaurant)
    db.commit()
    db.refresh(restaurant)
    logger.info(f"User {user_id} created restaurant {restaurant.id}")
    return Envelope(data=RestaurantResponse.model_validate(restaurant))


@owner_router.put("/{restaurant_id}", response_model=Envelope[RestaurantResponse])
def update_restaurant(
    restaurant_id: ResourceId,
    restaurant_data: RestaurantUpdate,
    user_id: CurrentUserId,
    db: Annotated[Session, Depends(get_db)],
):
    """Update a restaurant (owner only)."""
    restaurant = get_owned_restaurant(db, restaurant_id, user_id)

    for field, value in restaurant_data.model_dump(exclude_none=True).items():
        setattr(restaurant, field, value)

    db.commit()
    db.refresh(restaurant)
    return Envelope(data=RestaurantResponse.model_validate(restaurant))


@owner_router.delete("/{restaurant_id}", response_model=Envelope[DeletedResponse])
def delete_restaurant(
    restaurant_id: ResourceId,
    user_id: CurrentUserId,
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a restaurant and its dishes (owner only)."""
    restaurant = get_owned_restaurant(db, restaurant_id, user_id)

    has_orders = db.query(Order.id).filter(Order.restaurant_id == restaurant_id).first()
    if has_orders:
        raise ConflictError("Restaurant has orders and cannot be deleted")

    db.delete(restaurant)
    db.commit()
    logger.info(f"User {user_id} deleted restaurant {restaurant_id}")
    return Envelope(data=DeletedResponse())
