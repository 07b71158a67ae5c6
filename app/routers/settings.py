from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db import get_db
from app.schemas.settings import SettingsResponse, TimeSlotsResponse
from app.utils.booking_lifecycle import get_booking_settings
from app.utils.scheduler import generate_time_slots


router = APIRouter(
    prefix="/settings",
    tags=["settings"],
)


@router.get("/", response_model=SettingsResponse)
def get_settings(db: Session = Depends(get_db)):
    """
    Business hours and booking limits.
    """
    return get_booking_settings(db)


@router.get("/time_slots", response_model=TimeSlotsResponse)
def get_time_slots(db: Session = Depends(get_db)):
    """
    Bookable start times generated from the business hours and interval.
    """
    booking_settings = get_booking_settings(db)
    slots = generate_time_slots(
        booking_settings.business_start_time,
        booking_settings.business_end_time,
        booking_settings.booking_interval_minutes,
    )
    return TimeSlotsResponse(time_slots=slots)
