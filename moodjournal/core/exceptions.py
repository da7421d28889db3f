# moodjournal/core/exceptions.py
"""Errors raised by the entry store and the wire-format helpers.

Database failures are not wrapped: ``sqlalchemy.exc.SQLAlchemyError``
reaches the caller as raised by the driver.
"""


class MoodJournalError(Exception):
    """Base class for mood journal errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MoodJournalError, ValueError):
    """Malformed date, unknown mood token or a date in the future."""


class NotFoundError(MoodJournalError):
    """Update or delete referencing a mood entry that does not exist."""

    def __init__(self, entry_id: int):
        super().__init__(f"Mood entry with ID {entry_id} not found")
        self.entry_id = entry_id
