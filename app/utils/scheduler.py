import re
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional


TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
DATE_FORMAT = "%Y-%m-%d"


def parse_time(value: str) -> int:
    """
    Convert a zero-padded "HH:MM" string into minutes since midnight.
    """
    if not isinstance(value, str) or not TIME_PATTERN.fullmatch(value):
        raise ValueError(f"Time must be in HH:MM format: {value!r}")
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def format_time(minutes: int) -> str:
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}"


def parse_date(value: str) -> date:
    """
    Parse a zero-padded "YYYY-MM-DD" string.
    """
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        raise ValueError(f"Date must be in YYYY-MM-DD format: {value!r}")
    return datetime.strptime(value, DATE_FORMAT).date()


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def generate_time_slots(start_time: str, end_time: str, interval_minutes: int) -> List[str]:
    """
    List the bookable start times between business hours.

    Slots begin at start_time and advance by interval_minutes, stopping strictly
    before end_time. An empty list is returned when start_time >= end_time.
    """
    if interval_minutes <= 0:
        raise ValueError(f"Interval must be positive: {interval_minutes}")

    current = parse_time(start_time)
    end = parse_time(end_time)

    slots = []
    while current < end:
        slots.append(format_time(current))
        current += interval_minutes
    return slots


def get_week_dates(base_date: date) -> List[date]:
    """
    Return the seven dates of base_date's ISO week, Monday first.
    """
    monday = base_date - timedelta(days=base_date.isoweekday() - 1)
    return [monday + timedelta(days=offset) for offset in range(7)]


def intervals_overlap(start_a: str, end_a: str, start_b: str, end_b: str) -> bool:
    # Half-open ranges: touching endpoints do not overlap
    return parse_time(start_a) < parse_time(end_b) and parse_time(start_b) < parse_time(end_a)


def has_conflict(start_time: str, end_time: str, existing_bookings: Iterable) -> bool:
    """
    Check a candidate range against bookings already scoped to one room and date.

    The caller is responsible for that scoping; bookings are only compared by
    their start_time and end_time attributes.
    """
    for booking in existing_bookings:
        if intervals_overlap(start_time, end_time, booking.start_time, booking.end_time):
            return True
    return False


def booking_for_slot(bookings: Iterable, room_id: int, day: str, slot: str) -> Optional[object]:
    """Find the booking of room_id on day that starts exactly at slot."""
    for booking in bookings:
        if booking.room_id == room_id and booking.date == day and booking.start_time == slot:
            return booking
    return None
