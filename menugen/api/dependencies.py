"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, Path
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from menugen.config import Settings, get_settings
from menugen.database import get_db
from menugen.errors import AuthenticationError, AuthorizationError, NotFoundError
from menugen.models.restaurant import Restaurant
from menugen.schemas.common import MAX_ID
from menugen.services.orders import OrderService
from menugen.services.security import verify_token

# auto_error is off so a missing header gets the same 401 envelope as a bad token
security = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> int:
    """Resolve the caller's user id from the bearer token."""
    if credentials is None:
        raise AuthenticationError("Unauthorized")

    user_id = verify_token(credentials.credentials, settings.jwt_secret)
    if user_id is None:
        raise AuthenticationError("Invalid or expired token")

    return user_id


CurrentUserId = Annotated[int, Depends(get_current_user_id)]

# Path ids outside the INTEGER column range are rejected before any query
ResourceId = Annotated[int, Path(gt=0, le=MAX_ID)]


def get_owned_restaurant(db: Session, restaurant_id: int, user_id: int) -> Restaurant:
    """Get a restaurant the user owns."""
    restaurant = db.query(Restaurant).filter(Restaurant.id == restaurant_id).first()
    if not restaurant:
        raise NotFoundError("Restaurant not found")
    if restaurant.owner_id != user_id:
        raise AuthorizationError()
    return restaurant


def get_order_service(
    db: Annotated[Session, Depends(get_db)],
) -> OrderService:
    """Get order service with dependencies."""
    return OrderService(db)
