"""
Booking lifecycle: create, look up and cancel reservations.

Every function takes an open SQLAlchemy session and, where the outcome
depends on the time of day, the current datetime as ``now`` so callers
decide which clock is used.
"""
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, time
from typing import List, Optional
from sqlalchemy import and_, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.exceptions import (
    BookingConflictError,
    BookingNotCancellableError,
    BookingValidationError,
    PersistenceUnavailableError,
    RoomNotFoundError,
    SettingsNotFoundError,
)
from app.models.booking import Booking
from app.models.room import Room
from app.models.settings import BookingSettings
from app.utils.scheduler import format_date, format_time, has_conflict, parse_date, parse_time
from app.utils.validation_helpers import validate_booking, validate_lookup


logger = logging.getLogger(__name__)


@dataclass
class BookingLookup:
    booking: Booking
    is_past: bool

    @property
    def can_cancel(self) -> bool:
        return not self.is_past


@contextmanager
def database_errors(db: Session, action: str):
    """Turn SQLAlchemy failures into PersistenceUnavailableError after a rollback."""
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Database error while {action}: {exc}")
        raise PersistenceUnavailableError(f"Database error while {action}") from exc


def get_booking_settings(db: Session) -> BookingSettings:
    with database_errors(db, "loading settings"):
        booking_settings = db.query(BookingSettings).first()
    if booking_settings is None:
        logger.error("Settings not found, seed the database via /init-data")
        raise SettingsNotFoundError("Settings have not been initialised")
    return booking_settings


def list_rooms(db: Session) -> List[Room]:
    with database_errors(db, "loading rooms"):
        return db.query(Room).order_by(Room.order, Room.id).all()


def get_room(db: Session, room_id: int) -> Room:
    with database_errors(db, f"loading room {room_id}"):
        room = db.query(Room).filter(Room.id == room_id).first()
    if room is None:
        logger.error(f"Room not found: {room_id}")
        raise RoomNotFoundError(room_id)
    return room


def bookings_for_room_on(db: Session, room_id: int, day: str) -> List[Booking]:
    with database_errors(db, f"loading bookings of room {room_id} on {day}"):
        return db.query(Booking).filter(Booking.room_id == room_id, Booking.date == day).all()


def list_bookings_between(db: Session, date_from: str, date_to: str) -> List[Booking]:
    """Bookings dated within [date_from, date_to], both "YYYY-MM-DD"."""
    with database_errors(db, f"loading bookings from {date_from} to {date_to}"):
        return (
            db.query(Booking)
            .filter(Booking.date >= date_from, Booking.date <= date_to)
            .order_by(Booking.date, Booking.start_time, Booking.id)
            .all()
        )


def booking_starts_at(booking: Booking) -> datetime:
    hours, minutes = divmod(parse_time(booking.start_time), 60)
    return datetime.combine(parse_date(booking.date), time(hours, minutes))


def is_past_booking(booking: Booking, now: datetime) -> bool:
    return booking_starts_at(booking) < now


def count_upcoming_bookings(db: Session, now: datetime) -> int:
    """Bookings whose start is at or after now, matching is_past_booking."""
    today = format_date(now.date())
    # Starts within the current, already begun minute are past
    cutoff = now.hour * 60 + now.minute + (1 if now.second or now.microsecond else 0)
    with database_errors(db, "counting upcoming bookings"):
        return (
            db.query(Booking)
            .filter(
                or_(
                    Booking.date > today,
                    and_(Booking.date == today, Booking.start_time >= format_time(cutoff)),
                )
            )
            .count()
        )


def create_booking(db: Session, payload, now: datetime) -> Booking:
    """
    Validate, check for overlaps and store a new booking.

    Raises BookingValidationError with every invalid field, BookingConflictError
    when the range overlaps an existing booking of the same room and date, and
    RoomNotFoundError when the room reference does not resolve. Nothing is
    written unless all checks pass.

    The overlap check and the insert are not one transaction, so two requests
    racing for the same slot can both succeed.
    """
    booking_settings = get_booking_settings(db)

    errors = validate_booking(payload, booking_settings, now.date())
    if errors:
        logger.warning(f"Rejected booking request, invalid fields: {sorted(errors)}")
        raise BookingValidationError(errors)

    existing = bookings_for_room_on(db, payload.room_id, payload.date)
    if has_conflict(payload.start_time, payload.end_time, existing):
        logger.error(
            f"Overlapping booking found for room_id: {payload.room_id}, "
            f"date: {payload.date}, time: {payload.start_time} to {payload.end_time}"
        )
        raise BookingConflictError("The selected time range is already booked")

    room = get_room(db, payload.room_id)

    db_booking = Booking(
        room_id=room.id,
        room_name=room.name,
        date=payload.date,
        start_time=payload.start_time,
        end_time=payload.end_time,
        representative_name=payload.representative_name,
        phone_number=payload.phone_number,
        number_of_people=payload.number_of_people,
        purpose=payload.purpose or None,
    )
    with database_errors(db, "saving booking"):
        db.add(db_booking)
        db.commit()
        db.refresh(db_booking)
    logger.debug(
        f"Created booking: {db_booking.id}, room_id: {room.id}, "
        f"{db_booking.date} {db_booking.start_time}-{db_booking.end_time}"
    )
    return db_booking


def find_booking(db: Session, representative_name: str, phone_number: str, now: datetime) -> Optional[BookingLookup]:
    """
    Find a booking by representative name and phone number.

    When several bookings match, the earliest by date and start time wins.
    Returns None when nothing matches.
    """
    errors = validate_lookup(representative_name, phone_number)
    if errors:
        raise BookingValidationError(errors)

    with database_errors(db, "searching bookings"):
        booking = (
            db.query(Booking)
            .filter(
                Booking.representative_name == representative_name,
                Booking.phone_number == phone_number,
            )
            .order_by(Booking.date, Booking.start_time, Booking.id)
            .first()
        )
    if booking is None:
        logger.debug(f"No booking found for representative: {representative_name}")
        return None

    lookup = BookingLookup(booking=booking, is_past=is_past_booking(booking, now))
    logger.debug(f"Found booking: {booking.id}, is_past: {lookup.is_past}")
    return lookup


def cancel_booking(db: Session, booking_id: int, now: datetime) -> bool:
    """
    Delete an upcoming booking.

    Returns False when the booking no longer exists; callers treat that the
    same as a successful cancellation. Bookings that have already started
    raise BookingNotCancellableError.
    """
    with database_errors(db, f"loading booking {booking_id}"):
        booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if booking is None:
        logger.info(f"Booking {booking_id} already gone, nothing to cancel")
        return False

    if is_past_booking(booking, now):
        logger.error(f"Refusing to cancel past booking: {booking_id}")
        raise BookingNotCancellableError("Past bookings cannot be cancelled")

    with database_errors(db, f"deleting booking {booking_id}"):
        db.delete(booking)
        db.commit()
    logger.debug(f"Deleted booking: {booking_id}")
    return True
