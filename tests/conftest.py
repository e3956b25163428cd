"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from datetime import date, timedelta
from decimal import Decimal
from typing import Any

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from ordertrack import models  # noqa: E402
from ordertrack.database import Base, get_db  # noqa: E402
from ordertrack.domain.orders.entities.order import OrderStatus  # noqa: E402
from ordertrack.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# One shared connection so the app thread sees the tables created here
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    """Create a user directly in the database."""
    user = models.User(username="testuser", email="test@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def test_order(db_session: Session, test_user: models.User) -> models.Order:
    """Create an order due in a week for the test user."""
    order = models.Order(
        user_id=test_user.id,
        product_name="Test Product",
        delivery_date=date.today() + timedelta(days=7),
        status=OrderStatus.CREATED,
        total=Decimal("99.99"),
    )
    db_session.add(order)
    db_session.commit()
    db_session.refresh(order)
    return order
