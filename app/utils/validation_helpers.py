import re
from datetime import date, timedelta
from typing import Dict, Optional
from app.config import settings
from app.utils.scheduler import parse_date, parse_time


PHONE_PATTERN = re.compile(r"[0-9-]+")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def max_booking_days(booking_settings) -> int:
    if booking_settings is None or booking_settings.max_booking_days is None:
        return settings.DEFAULT_MAX_BOOKING_DAYS
    return booking_settings.max_booking_days


def validate_booking(payload, booking_settings, today: date) -> Dict[str, str]:
    """
    Check every field of a booking request and collect the problems.

    Returns a mapping of camelCase field name to message; an empty mapping
    means the request is valid. Nothing stops at the first error.
    """
    errors = {}

    if payload.room_id is None:
        errors["roomId"] = "Please select a room"

    if _is_blank(payload.date):
        errors["date"] = "Please select a date"
    else:
        try:
            booking_date = parse_date(payload.date)
        except ValueError:
            errors["date"] = "Date must be in YYYY-MM-DD format"
        else:
            horizon = max_booking_days(booking_settings)
            if booking_date < today:
                errors["date"] = "Past dates cannot be selected"
            elif booking_date > today + timedelta(days=horizon):
                errors["date"] = f"Please select a date within {horizon} days"

    start = end = None
    if _is_blank(payload.start_time):
        errors["startTime"] = "Please select a start time"
    else:
        try:
            start = parse_time(payload.start_time)
        except ValueError:
            errors["startTime"] = "Start time must be in HH:MM format"

    if _is_blank(payload.end_time):
        errors["endTime"] = "Please select an end time"
    else:
        try:
            end = parse_time(payload.end_time)
        except ValueError:
            errors["endTime"] = "End time must be in HH:MM format"

    if start is not None and end is not None and start >= end:
        errors["endTime"] = "End time must be after the start time"

    if booking_settings is not None:
        if start is not None and start < parse_time(booking_settings.business_start_time):
            errors.setdefault("startTime", "Start time is before business hours")
        if end is not None and end > parse_time(booking_settings.business_end_time):
            errors.setdefault("endTime", "End time is after business hours")

    if _is_blank(payload.representative_name):
        errors["representativeName"] = "Please enter the representative's name"

    if _is_blank(payload.phone_number):
        errors["phoneNumber"] = "Please enter a phone number"
    elif not PHONE_PATTERN.fullmatch(payload.phone_number):
        errors["phoneNumber"] = "Phone number may only contain digits and hyphens"

    if payload.number_of_people is None:
        errors["numberOfPeople"] = "Please enter the number of people"
    elif payload.number_of_people < 1:
        errors["numberOfPeople"] = "Number of people must be at least 1"

    return errors


def validate_lookup(representative_name: Optional[str], phone_number: Optional[str]) -> Dict[str, str]:
    errors = {}
    if _is_blank(representative_name):
        errors["representativeName"] = "Please enter the representative's name"
    if _is_blank(phone_number):
        errors["phoneNumber"] = "Please enter a phone number"
    return errors
