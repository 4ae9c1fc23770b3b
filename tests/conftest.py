"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from menugen.database import Base, get_db
from menugen.main import app
from menugen.models import Dish, Restaurant, User
from menugen.services.security import hash_password


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/menugen", "/menugen_test")
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, email: str, password: str = "testpass123", name: str = "Test User"):
    """Register a user through the API and return auth headers for them."""
    response = client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201
    data = response.json()["data"]
    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )


@pytest.fixture
def register_user(client):
    """Factory that registers extra users through the API."""

    def _register(email: str, **kwargs):
        return register(client, email, **kwargs)

    return _register


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register(client, "test@example.com")


@pytest.fixture
def other_auth_headers(client):
    """Create a second, unrelated user."""
    return register(client, "other@example.com", name="Other User")


@pytest.fixture
def owner(db):
    """A restaurant owner stored directly in the database."""
    user = User(email="owner@example.com", password_hash=hash_password("ownerpass"), name="Owner")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def customer(db):
    """A customer stored directly in the database."""
    user = User(email="customer@example.com", password_hash=hash_password("custpass"), name="Cust")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def restaurant(db, owner):
    """A restaurant with three dishes; the last one is unavailable."""
    restaurant = Restaurant(
        owner_id=owner.id, name="Luigi's", description="Pasta", address="Main St"
    )
    db.add(restaurant)
    db.flush()
    db.add_all(
        [
            Dish(restaurant_id=restaurant.id, name="Pasta", price=5.00, category="Main"),
            Dish(restaurant_id=restaurant.id, name="Salad", price=3.50, category="Starters"),
            Dish(
                restaurant_id=restaurant.id,
                name="Soup of the Day",
                price=4.25,
                category="Starters",
                available=False,
            ),
        ]
    )
    db.commit()
    db.refresh(restaurant)
    return restaurant


@pytest.fixture
def dishes(db, restaurant):
    """The restaurant's dishes keyed by name."""
    return {d.name: d for d in db.query(Dish).filter(Dish.restaurant_id == restaurant.id).all()}
