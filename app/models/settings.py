from sqlalchemy import Column, Integer, String
from app.db import Base


SETTINGS_ID = "config"


class BookingSettings(Base):
    """Singleton row holding business hours and booking limits."""

    __tablename__ = "settings"

    id = Column(String, primary_key=True, default=SETTINGS_ID)
    business_start_time = Column(String(5), nullable=False)
    business_end_time = Column(String(5), nullable=False)
    booking_interval_minutes = Column(Integer, nullable=False)
    max_booking_days = Column(Integer, nullable=False)
    admin_password_hash = Column(String, nullable=False)
