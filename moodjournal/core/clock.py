# moodjournal/core/clock.py
from datetime import date, datetime, timezone


def get_today() -> date:
    """FastAPI dependency: the current calendar date."""
    return date.today()


def get_now() -> datetime:
    """FastAPI dependency: the current UTC timestamp."""
    return datetime.now(timezone.utc)
