import os
from datetime import datetime
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from app.main import app
from app.db import Base, get_db
from app.models.booking import Booking
from app.models.room import Room
from app.models.settings import SETTINGS_ID, BookingSettings
from app.utils.auth import get_password_hash
from app.utils.clock import get_now

# Test database setup
if not os.path.exists("./out"):
    os.makedirs("./out")

SQLALCHEMY_DATABASE_URL = "sqlite:///./out/tests.db"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create test tables
Base.metadata.create_all(bind=engine)

# Wednesday; its week runs from 2025-01-13 to 2025-01-19
FIXED_NOW = datetime(2025, 1, 15, 12, 0)
ADMIN_PASSWORD = "admin123"


# Dependency override
def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()


def override_get_now():
    return FIXED_NOW


app.dependency_overrides[get_db] = override_get_db
app.dependency_overrides[get_now] = override_get_now

client = TestClient(app)


# Fixtures
@pytest.fixture(autouse=True)
def clear_db():
    """Clear all data from all tables before each test"""
    with engine.connect() as conn:
        trans = conn.begin()
        conn.execute(text("PRAGMA foreign_keys = OFF"))
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())
        conn.execute(text("PRAGMA foreign_keys = ON"))
        trans.commit()


@pytest.fixture
def test_db():
    """Provide a database session for testing"""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def test_settings(test_db):
    """Business hours 10:00-19:00 in 15 minute steps, bookable 60 days ahead"""
    booking_settings = BookingSettings(
        id=SETTINGS_ID,
        business_start_time="10:00",
        business_end_time="19:00",
        booking_interval_minutes=15,
        max_booking_days=60,
        admin_password_hash=get_password_hash(ADMIN_PASSWORD),
    )
    test_db.add(booking_settings)
    test_db.commit()
    test_db.refresh(booking_settings)
    return booking_settings


@pytest.fixture
def test_room(test_db):
    room = Room(name="Room A", capacity=10, order=1)
    test_db.add(room)
    test_db.commit()
    test_db.refresh(room)
    return room


@pytest.fixture
def test_booking(test_db, test_room):
    """Booking of test_room on the day after FIXED_NOW, 10:00-11:00"""
    booking = Booking(
        room_id=test_room.id,
        room_name=test_room.name,
        date="2025-01-16",
        start_time="10:00",
        end_time="11:00",
        representative_name="Yamada",
        phone_number="090-1234-5678",
        number_of_people=4,
        purpose="Team Meeting",
    )
    test_db.add(booking)
    test_db.commit()
    test_db.refresh(booking)
    return booking


@pytest.fixture
def admin_headers(test_settings):
    """Fixture to get authentication headers"""
    login_response = client.post("/auth/login", json={"password": ADMIN_PASSWORD})
    token = login_response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
