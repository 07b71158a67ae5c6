import logging
from sqlalchemy.orm import Session
from app.config import settings
from app.models.room import Room
from app.models.settings import SETTINGS_ID, BookingSettings
from app.utils.auth import get_password_hash
from app.utils.booking_lifecycle import database_errors


logger = logging.getLogger(__name__)

DEFAULT_ROOMS = [
    {"name": "Room A", "capacity": 10, "order": 1},
    {"name": "Room B", "capacity": 6, "order": 2},
    {"name": "Room C", "capacity": 4, "order": 3},
]

DEFAULT_SETTINGS = {
    "business_start_time": "10:00",
    "business_end_time": "19:00",
    "booking_interval_minutes": 15,
    "max_booking_days": 60,
}


def seed_initial_data(db: Session) -> dict:
    """
    Insert the default rooms and settings when they are missing.

    Safe to run repeatedly; existing rows are left untouched.
    """
    created = {"rooms": 0, "settings": False}
    with database_errors(db, "seeding initial data"):
        if db.query(Room).count() == 0:
            for room in DEFAULT_ROOMS:
                db.add(Room(**room))
            created["rooms"] = len(DEFAULT_ROOMS)

        if db.query(BookingSettings).filter(BookingSettings.id == SETTINGS_ID).first() is None:
            db.add(
                BookingSettings(
                    id=SETTINGS_ID,
                    admin_password_hash=get_password_hash(settings.DEFAULT_ADMIN_PASSWORD),
                    **DEFAULT_SETTINGS,
                )
            )
            created["settings"] = True

        db.commit()
    logger.info(f"Seeded initial data: {created}")
    return created
