"""Account service: registration and credential checks."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from menugen.errors import ConflictError
from menugen.models.user import User
from menugen.services.security import hash_password, verify_password

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user(db: Session, user_id: int) -> User | None:
    """Get a user by id."""
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email (case-insensitive)."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        logger.warning(f"Login failed: unknown email {normalize_email(email)}")
        return None
    if not verify_password(password, user.password_hash):
        logger.warning(f"Login failed: wrong password for user {user.id}")
        return None
    return user


def register_user(db: Session, email: str, password: str, name: str) -> User:
    """Create a new user, rejecting an email that is already registered."""
    if get_user_by_email(db, email):
        raise ConflictError("Email already registered")

    user = User(email=normalize_email(email), password_hash=hash_password(password), name=name)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration of the same email
        db.rollback()
        raise ConflictError("Email already registered") from e
    db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user
