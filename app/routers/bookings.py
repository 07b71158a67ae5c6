from datetime import date, datetime
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.schemas.booking import BookingCreate, BookingLookupResponse, BookingResponse
from app.utils.booking_lifecycle import cancel_booking, create_booking, find_booking, list_bookings_between
from app.utils.clock import get_now
from app.utils.scheduler import format_date
import logging

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/bookings",
    tags=["bookings"],
)


@router.post(
    "/",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new booking",
    description="Book a room for a time range after validating the request and checking for overlaps.",
)
def create_booking_endpoint(
    booking: BookingCreate,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    """
    Create a booking.

    - **roomId**: ID of the room to book.
    - **date**: Booking date, YYYY-MM-DD, between today and the booking horizon.
    - **startTime** / **endTime**: HH:MM, start strictly before end.
    - **representativeName**: Name of the person responsible.
    - **phoneNumber**: Digits and hyphens only.
    - **numberOfPeople**: At least 1.
    - **purpose**: Optional meeting purpose.

    Invalid fields are reported together under `detail.errors`. An overlapping
    booking yields 409.
    """
    logger.debug(f"Creating booking for room_id: {booking.room_id}, date: {booking.date}")
    return create_booking(db, booking, now)


@router.get(
    "/",
    response_model=List[BookingResponse],
    summary="List bookings in a date range",
    description="Retrieve bookings dated between date_from and date_to inclusive.",
)
def get_bookings(
    date_from: date,
    date_to: date,
    db: Session = Depends(get_db),
):
    if date_from > date_to:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="date_from must not be after date_to")
    bookings = list_bookings_between(db, format_date(date_from), format_date(date_to))
    logger.debug(f"Retrieved {len(bookings)} bookings between {date_from} and {date_to}")
    return bookings


@router.get(
    "/lookup",
    response_model=BookingLookupResponse,
    summary="Find a booking",
    description="Look up a booking by representative name and phone number.",
)
def lookup_booking(
    representative_name: str = Query("", alias="representativeName"),
    phone_number: str = Query("", alias="phoneNumber"),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    """
    Both values must match the booking exactly. When several bookings match,
    the earliest one is returned. Bookings that have already started are
    flagged `isPast` and cannot be cancelled.
    """
    lookup = find_booking(db, representative_name, phone_number, now)
    if lookup is None:
        return BookingLookupResponse(found=False)
    return BookingLookupResponse(
        found=True,
        booking=BookingResponse.model_validate(lookup.booking),
        is_past=lookup.is_past,
        can_cancel=lookup.can_cancel,
    )


@router.delete(
    "/{booking_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Cancel a booking",
    description="Delete an upcoming booking. Cancelling a booking that no longer exists succeeds.",
)
def delete_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    cancel_booking(db, booking_id, now)
    return None
