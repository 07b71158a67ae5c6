from fastapi import status
from tests.conf_tests import client, clear_db, test_db, test_settings, test_room, test_booking


# pylint: disable-next=redefined-outer-name
def test_calendar_defaults_to_current_week(test_settings, test_room):
    response = client.get("/calendar/")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["weekDates"] == [f"2025-01-{day}" for day in range(13, 20)]
    assert data["previousWeek"] == "2025-01-06"
    assert data["nextWeek"] == "2025-01-20"
    assert len(data["timeSlots"]) == 36


# pylint: disable-next=redefined-outer-name
def test_calendar_marks_booking_start_slot(test_settings, test_room, test_booking):
    response = client.get("/calendar/", params={"date": "2025-01-19"})
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [booking["id"] for booking in data["bookings"]] == [test_booking.id]

    room_calendar = data["rooms"][0]
    assert room_calendar["room"]["id"] == test_room.id
    rows = {row["time"]: row["cells"] for row in room_calendar["rows"]}

    # 2025-01-16 is the fourth day of the week
    booked = rows["10:00"][3]
    assert booked["date"] == "2025-01-16"
    assert booked["bookingId"] == test_booking.id
    assert booked["representativeName"] == "Yamada"

    assert rows["10:00"][2]["bookingId"] is None
    assert rows["10:15"][3]["bookingId"] is None


# pylint: disable-next=redefined-outer-name
def test_calendar_other_week_has_no_bookings(test_settings, test_room, test_booking):
    response = client.get("/calendar/", params={"date": "2025-01-20"})
    data = response.json()
    assert data["weekDates"][0] == "2025-01-20"
    assert data["bookings"] == []


def test_calendar_without_settings():
    response = client.get("/calendar/")
    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
