# models/__init__.py
"""
Pydantic models for request/response validation
"""

from .mood import (
    Mood,
    MoodOption,
    mood_options,
    mood_score,
    mood_label,
)

from .mood_entry import (
    MoodEntryCreate,
    MoodEntryUpdate,
    MoodEntry,
    DeleteResponse,
    parse_wire_date,
)

from .analytics import (
    MoodCount,
    WeeklyTrend,
    MoodStats,
)

__all__ = [
    # Mood catalogue
    "Mood",
    "MoodOption",
    "mood_options",
    "mood_score",
    "mood_label",

    # Mood entries
    "MoodEntryCreate",
    "MoodEntryUpdate",
    "MoodEntry",
    "DeleteResponse",
    "parse_wire_date",

    # Analytics
    "MoodCount",
    "WeeklyTrend",
    "MoodStats",
]
