from datetime import date, datetime, timedelta
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db import get_db
from app.schemas.booking import BookingResponse
from app.schemas.room import RoomResponse
from app.schemas.calendar import CalendarCell, CalendarRow, RoomCalendar, WeeklyCalendarResponse
from app.utils.booking_lifecycle import get_booking_settings, list_bookings_between, list_rooms
from app.utils.clock import get_now
from app.utils.scheduler import booking_for_slot, format_date, generate_time_slots, get_week_dates
import logging

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/calendar",
    tags=["calendar"],
)


@router.get(
    "/",
    response_model=WeeklyCalendarResponse,
    summary="Weekly availability",
    description="Room availability for the Monday-to-Sunday week containing the given date.",
)
def get_weekly_calendar(
    date: Optional[date] = None,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    """
    Build the weekly calendar grid.

    - **date**: Any day of the wanted week (default: today).

    Each room has one row per time slot and one cell per day; a cell carries
    the booking that starts at that slot, if any.
    """
    base_date = date or now.date()
    week_dates = get_week_dates(base_date)
    days = [format_date(day) for day in week_dates]

    rooms = list_rooms(db)
    booking_settings = get_booking_settings(db)
    time_slots = generate_time_slots(
        booking_settings.business_start_time,
        booking_settings.business_end_time,
        booking_settings.booking_interval_minutes,
    )
    bookings = list_bookings_between(db, days[0], days[-1])
    logger.debug(f"Calendar for week of {days[0]}: {len(rooms)} rooms, {len(bookings)} bookings")

    room_calendars = []
    for room in rooms:
        rows = []
        for slot in time_slots:
            cells = []
            for day in days:
                booking = booking_for_slot(bookings, room.id, day, slot)
                cells.append(
                    CalendarCell(
                        date=day,
                        booking_id=booking.id if booking else None,
                        representative_name=booking.representative_name if booking else None,
                    )
                )
            rows.append(CalendarRow(time=slot, cells=cells))
        room_calendars.append(RoomCalendar(room=RoomResponse.model_validate(room), rows=rows))

    return WeeklyCalendarResponse(
        week_dates=week_dates,
        previous_week=week_dates[0] - timedelta(days=7),
        next_week=week_dates[0] + timedelta(days=7),
        time_slots=time_slots,
        rooms=room_calendars,
        bookings=[BookingResponse.model_validate(booking) for booking in bookings],
    )
