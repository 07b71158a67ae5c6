from datetime import date, timedelta
from types import SimpleNamespace
import pytest

from app.utils.scheduler import (
    booking_for_slot,
    format_date,
    format_time,
    generate_time_slots,
    get_week_dates,
    has_conflict,
    intervals_overlap,
    parse_date,
    parse_time,
)


def existing(start_time, end_time):
    return SimpleNamespace(start_time=start_time, end_time=end_time)


# Time slots
def test_generate_time_slots_stops_before_end():
    assert generate_time_slots("10:00", "10:31", 15) == ["10:00", "10:15", "10:30"]


def test_generate_time_slots_excludes_end_time():
    assert generate_time_slots("10:00", "11:00", 30) == ["10:00", "10:30"]


def test_generate_time_slots_rolls_minutes_into_hours():
    assert generate_time_slots("09:45", "11:00", 20) == ["09:45", "10:05", "10:25", "10:45"]


def test_generate_time_slots_business_day():
    slots = generate_time_slots("10:00", "19:00", 15)
    assert len(slots) == 36
    assert slots[0] == "10:00"
    assert slots[-1] == "18:45"
    steps = {parse_time(b) - parse_time(a) for a, b in zip(slots, slots[1:])}
    assert steps == {15}


@pytest.mark.parametrize("start, end", [("12:00", "12:00"), ("13:00", "09:00")])
def test_generate_time_slots_empty_when_start_not_before_end(start, end):
    assert generate_time_slots(start, end, 15) == []


def test_generate_time_slots_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        generate_time_slots("10:00", "11:00", 0)


@pytest.mark.parametrize("value", ["9:00", "24:00", "10:60", "1000", "10:00\n", "", None])
def test_parse_time_rejects_malformed(value):
    with pytest.raises(ValueError):
        parse_time(value)


def test_format_time_zero_pads():
    assert format_time(5) == "00:05"
    assert format_time(9 * 60) == "09:00"


# Week range
def test_week_dates_start_on_monday():
    week = get_week_dates(date(2025, 1, 15))
    assert week[0] == date(2025, 1, 13)
    assert week[0].isoweekday() == 1
    assert week[-1] == date(2025, 1, 19)
    assert week == [date(2025, 1, 13) + timedelta(days=i) for i in range(7)]


def test_week_dates_same_for_every_day_of_week():
    monday = date(2024, 12, 30)
    expected = get_week_dates(monday)
    for offset in range(7):
        assert get_week_dates(monday + timedelta(days=offset)) == expected


def test_week_dates_for_sunday_belong_to_previous_monday():
    assert get_week_dates(date(2025, 1, 19))[0] == date(2025, 1, 13)


# Conflicts
@pytest.mark.parametrize(
    "start, end, expected",
    [
        ("08:30", "09:00", False),
        ("08:30", "09:01", True),
        ("10:00", "11:00", False),
        ("09:30", "09:45", True),
        ("08:00", "11:00", True),
        ("09:00", "10:00", True),
    ],
)
def test_has_conflict_against_single_booking(start, end, expected):
    assert has_conflict(start, end, [existing("09:00", "10:00")]) is expected


def test_has_conflict_without_bookings():
    assert has_conflict("09:00", "10:00", []) is False


def test_has_conflict_checks_every_booking():
    bookings = [existing("09:00", "10:00"), existing("13:00", "14:00")]
    assert has_conflict("13:30", "15:00", bookings) is True
    assert has_conflict("10:00", "13:00", bookings) is False


def test_intervals_overlap_is_symmetric():
    assert intervals_overlap("09:00", "10:00", "09:59", "11:00")
    assert intervals_overlap("09:59", "11:00", "09:00", "10:00")


def test_booking_for_slot_matches_start_time_only():
    booking = SimpleNamespace(room_id=1, date="2025-01-16", start_time="10:00", end_time="11:00")
    assert booking_for_slot([booking], 1, "2025-01-16", "10:00") is booking
    assert booking_for_slot([booking], 1, "2025-01-16", "10:15") is None
    assert booking_for_slot([booking], 2, "2025-01-16", "10:00") is None
    assert booking_for_slot([booking], 1, "2025-01-17", "10:00") is None


@pytest.mark.parametrize("value", ["2025-1-16", "2025-01-6", "2025-01-16\n", "2025/01/16", "2025-02-30"])
def test_parse_date_rejects_malformed(value):
    with pytest.raises(ValueError):
        parse_date(value)


def test_parse_date_round_trips_zero_padded():
    assert format_date(parse_date("2025-01-06")) == "2025-01-06"
