from typing import List
from app.schemas.base import CamelModel


class SettingsResponse(CamelModel):
    business_start_time: str
    business_end_time: str
    booking_interval_minutes: int
    max_booking_days: int


class TimeSlotsResponse(CamelModel):
    time_slots: List[str]
