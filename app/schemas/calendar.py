from datetime import date
from typing import List, Optional
from app.schemas.base import CamelModel
from app.schemas.booking import BookingResponse
from app.schemas.room import RoomResponse


class CalendarCell(CamelModel):
    date: str
    booking_id: Optional[int] = None
    representative_name: Optional[str] = None


class CalendarRow(CamelModel):
    time: str
    cells: List[CalendarCell]


class RoomCalendar(CamelModel):
    room: RoomResponse
    rows: List[CalendarRow]


class WeeklyCalendarResponse(CamelModel):
    week_dates: List[date]
    previous_week: date
    next_week: date
    time_slots: List[str]
    rooms: List[RoomCalendar]
    bookings: List[BookingResponse]
