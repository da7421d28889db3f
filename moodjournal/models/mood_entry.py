# moodjournal/models/mood_entry.py
import re
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from moodjournal.core.exceptions import ValidationError
from moodjournal.models.mood import Mood

NOTE_MAX_LENGTH = 500

_WIRE_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_wire_date(value) -> date:
    """
    Parse a ``YYYY-MM-DD`` calendar string into a ``date``.

    ``date`` objects pass through unchanged. Datetimes, timestamps and any
    other string shape are rejected with ``ValidationError``.
    """
    if isinstance(value, datetime):
        raise ValidationError("Date must be in YYYY-MM-DD format")
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _WIRE_DATE_RE.match(value):
        raise ValidationError("Date must be in YYYY-MM-DD format")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError(f"Invalid calendar date: {value}")


class MoodEntryCreate(BaseModel):
    user_id: str = Field(..., min_length=1)
    date: date
    mood: Mood
    note: Optional[str] = Field(None, max_length=NOTE_MAX_LENGTH)

    @field_validator("date", mode="before")
    @classmethod
    def _wire_date(cls, v):
        return parse_wire_date(v)


class MoodEntryUpdate(BaseModel):
    """
    Partial update of an entry.

    Only fields present in the request are applied: an omitted ``note``
    leaves the stored note alone, while ``"note": null`` clears it. ``mood``
    may be omitted but never set to null.
    """
    mood: Optional[Mood] = None
    note: Optional[str] = Field(None, max_length=NOTE_MAX_LENGTH)

    @field_validator("mood")
    @classmethod
    def _mood_not_null(cls, v):
        if v is None:
            raise ValueError("mood cannot be null")
        return v


class MoodEntry(BaseModel):
    id: int
    user_id: str
    date: date
    mood: Mood
    note: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }


class DeleteResponse(BaseModel):
    success: bool
