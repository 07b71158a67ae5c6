from datetime import datetime


def get_now() -> datetime:
    """Current local time. Overridden in tests to pin the clock."""
    return datetime.now()
