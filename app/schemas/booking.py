from datetime import datetime
from typing import Optional
from app.schemas.base import CamelModel


class BookingCreate(CamelModel):
    # Every field is optional here so missing values are reported together
    # by the booking validator instead of one at a time by the parser.
    room_id: Optional[int] = None
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    representative_name: Optional[str] = None
    phone_number: Optional[str] = None
    number_of_people: Optional[int] = None
    purpose: Optional[str] = None


class BookingResponse(CamelModel):
    id: int
    room_id: int
    room_name: str
    date: str
    start_time: str
    end_time: str
    representative_name: str
    phone_number: str
    number_of_people: int
    purpose: Optional[str] = None
    created_at: Optional[datetime] = None


class BookingLookupResponse(CamelModel):
    found: bool
    booking: Optional[BookingResponse] = None
    is_past: Optional[bool] = None
    can_cancel: bool = False
