from typing import Dict


class BookingError(Exception):
    """Base class for booking domain errors."""


class BookingValidationError(BookingError):
    """Raised when one or more booking fields are invalid.

    ``errors`` maps the camelCase field name to a human readable message.
    """

    def __init__(self, errors: Dict[str, str]):
        super().__init__(f"Invalid booking fields: {', '.join(sorted(errors))}")
        self.errors = errors


class BookingConflictError(BookingError):
    """Raised when the requested time range overlaps an existing booking."""


class RoomNotFoundError(BookingError):
    def __init__(self, room_id):
        super().__init__(f"Room not found: {room_id}")
        self.room_id = room_id


class SettingsNotFoundError(BookingError):
    """Raised when the settings singleton has not been seeded."""


class BookingNotCancellableError(BookingError):
    """Raised when cancelling a booking that has already started."""


class PersistenceUnavailableError(BookingError):
    """Raised when the database cannot be reached or rejects an operation."""
