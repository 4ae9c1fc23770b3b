"""Restaurant and dish schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from menugen.schemas.common import MAX_PRICE


class RestaurantCreate(BaseModel):
    """Create a new restaurant."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field("", max_length=2000)
    address: str = Field("", max_length=500)


class RestaurantUpdate(BaseModel):
    """Update a restaurant."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    address: str | None = Field(None, max_length=500)


class RestaurantResponse(BaseModel):
    """Restaurant response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    name: str
    description: str
    address: str
    created_at: datetime


class DishCreate(BaseModel):
    """Add a dish to a restaurant menu."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field("", max_length=2000)
    price: float = Field(..., ge=0, le=MAX_PRICE)
    category: str = Field("Main", min_length=1, max_length=100)


class DishUpdate(BaseModel):
    """Update a dish."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    price: float | None = Field(None, ge=0, le=MAX_PRICE)
    category: str | None = Field(None, min_length=1, max_length=100)
    available: bool | None = None


class DishResponse(BaseModel):
    """Dish response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    restaurant_id: int
    name: str
    description: str
    price: float
    category: str
    available: bool
    created_at: datetime


class RestaurantDetailResponse(RestaurantResponse):
    """Restaurant with its menu."""

    dishes: list[DishResponse] = []
