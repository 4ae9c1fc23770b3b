"""Dish API endpoints, nested under the owner's restaurants."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from menugen.api.dependencies import CurrentUserId, ResourceId, get_owned_restaurant
from menugen.database import get_db
from menugen.errors import ConflictError, NotFoundError
from menugen.models.order import OrderItem
from menugen.models.restaurant import Dish
from menugen.schemas.common import DeletedResponse, Envelope
from menugen.schemas.restaurant import DishCreate, DishResponse, DishUpdate

router = APIRouter(prefix="/api/my/restaurants", tags=["dishes"])


def get_dish(db: Session, restaurant_id: int, dish_id: int) -> Dish:
    """Get a dish that belongs to the given restaurant."""
    dish = db.query(Dish).filter(Dish.id == dish_id, Dish.restaurant_id == restaurant_id).first()
    if not dish:
        raise NotFoundError("Dish not found")
    return dish


@router.post(
    "/{restaurant_id}/dishes",
    response_model=Envelope[DishResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_dish(
    restaurant_id: ResourceId,
    dish_data: DishCreate,
    user_id: CurrentUserId,
    db: Annotated[Session, Depends(get_db)],
):
    """Add a dish to a restaurant (owner only)."""
    get_owned_restaurant(db, restaurant_id, user_id)

    dish = Dish(
        restaurant_id=restaurant_id,
        name=dish_data.name,
        description=dish_data.description,
        price=dish_data.price,
        category=dish_data.category,
        available=True,
    )
    db.add(dish)
    db.commit()
    db.refresh(dish)
    return Envelope(data=DishResponse.model_validate(dish))


@router.put("/{restaurant_id}/dishes/{dish_id}", response_model=Envelope[DishResponse])
def update_dish(
    restaurant_id: ResourceId,
    dish_id: ResourceId,
    dish_data: DishUpdate,
    user_id: CurrentUserId,
    db: Annotated[Session, Depends(get_db)],
):
    """Update a dish, including its availability (owner only)."""
    get_owned_restaurant(db, restaurant_id, user_id)
    dish = get_dish(db, restaurant_id, dish_id)

    for field, value in dish_data.model_dump(exclude_none=True).items():
        setattr(dish, field, value)

    db.commit()
    db.refresh(dish)
    return Envelope(data=DishResponse.model_validate(dish))


@router.delete("/{restaurant_id}/dishes/{dish_id}", response_model=Envelope[DeletedResponse])
def delete_dish(
    restaurant_id: ResourceId,
    dish_id: ResourceId,
    user_id: CurrentUserId,
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a dish (owner only)."""
    get_owned_restaurant(db, restaurant_id, user_id)
    dish = get_dish(db, restaurant_id, dish_id)

    if db.query(OrderItem.id).filter(OrderItem.dish_id == dish_id).first():
        raise ConflictError("Dish appears in orders; mark it unavailable instead")

    db.delete(dish)
    db.commit()
    return Envelope(data=DeletedResponse())
