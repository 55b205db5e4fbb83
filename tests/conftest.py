"""Shared fixtures: in-memory database, users and a lifecycle manager."""
from datetime import timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401  registers every table
from models import Actor, UserRole
from models.database import Base
from services import LoadLifecycleManager, UserService
from utils.date_helpers import today_in_timezone

SHIPPER_ID = "shipper-0001"
DRIVER_A_ID = "driver-000a"
DRIVER_B_ID = "driver-000b"
ADMIN_ID = "admin-00001"


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Database session bound to the test engine."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def users(db_session):
    """Shipper, two drivers and an admin."""
    service = UserService(db_session)
    service.create_profile(SHIPPER_ID, "Saleh Trading", UserRole.SHIPPER, phone="0500000001")
    service.create_profile(DRIVER_A_ID, "Ahmed Driver", UserRole.DRIVER, phone="0511111111")
    service.create_profile(DRIVER_B_ID, "Badr Driver", UserRole.DRIVER, phone="0522222222")
    service.create_profile(ADMIN_ID, "Admin", UserRole.ADMIN, email="admin@example.com")
    return service


@pytest.fixture
def shipper(users):
    return Actor(id=SHIPPER_ID, role=UserRole.SHIPPER)


@pytest.fixture
def driver_a(users):
    return Actor(id=DRIVER_A_ID, role=UserRole.DRIVER)


@pytest.fixture
def driver_b(users):
    return Actor(id=DRIVER_B_ID, role=UserRole.DRIVER)


@pytest.fixture
def admin(users):
    return Actor(id=ADMIN_ID, role=UserRole.ADMIN)


@pytest.fixture
def lifecycle(db_session):
    return LoadLifecycleManager(db_session)


@pytest.fixture
def today():
    return today_in_timezone()


@pytest.fixture
def load_attributes(today):
    """Riyadh to Jeddah, picked up today."""
    return {
        "origin": "Riyadh",
        "destination": "Jeddah",
        "weight": 10,
        "price": 1000,
        "pickup_date": today.isoformat(),
        "receiver_name": "Khalid",
        "receiver_phone": "0555555555",
        "body_type": "box",
    }


@pytest.fixture
def yesterday(today):
    return today - timedelta(days=1)


@pytest.fixture
def posted_load(lifecycle, shipper, load_attributes):
    return lifecycle.post_load(shipper, load_attributes)
