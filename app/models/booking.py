from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, func
from app.db import Base


class Booking(Base):
    """A reservation of one room for a ``[start_time, end_time)`` range on one date.

    ``date`` is stored as ``YYYY-MM-DD`` and the times as zero-padded ``HH:MM``
    so range queries on them compare correctly as strings.
    """

    __tablename__ = "bookings"
    __table_args__ = (
        Index("ix_bookings_room_date", "room_id", "date"),
        Index("ix_bookings_identity", "representative_name", "phone_number"),
    )

    id = Column(Integer, primary_key=True, index=True)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False)
    room_name = Column(String, nullable=False)
    date = Column(String(10), nullable=False, index=True)
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=False)
    representative_name = Column(String, nullable=False)
    phone_number = Column(String, nullable=False)
    number_of_people = Column(Integer, nullable=False)
    purpose = Column(String, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
