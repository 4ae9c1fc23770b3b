"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from menugen.api.dependencies import CurrentUserId
from menugen.config import Settings, get_settings
from menugen.database import get_db
from menugen.errors import AuthenticationError, NotFoundError
from menugen.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from menugen.schemas.common import Envelope
from menugen.services.auth import authenticate_user, get_user, register_user
from menugen.services.security import create_token

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=Envelope[AuthResponse],
    status_code=status.HTTP_201_CREATED,
)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Register a new user."""
    user = register_user(db, user_data.email, user_data.password, user_data.name)

    return Envelope(
        data=AuthResponse(
            token=create_token(user.id, settings.jwt_secret),
            user=UserResponse.model_validate(user),
        )
    )


@router.post("/login", response_model=Envelope[AuthResponse])
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)
    if not user:
        raise AuthenticationError("Invalid email or password")

    return Envelope(
        data=AuthResponse(
            token=create_token(user.id, settings.jwt_secret),
            user=UserResponse.model_validate(user),
        )
    )


@router.get("/me", response_model=Envelope[UserResponse])
def get_me(
    user_id: CurrentUserId,
    db: Annotated[Session, Depends(get_db)],
):
    """Get current user information."""
    user = get_user(db, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return Envelope(data=UserResponse.model_validate(user))
