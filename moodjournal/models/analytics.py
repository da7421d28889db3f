# moodjournal/models/analytics.py
from typing import List, Literal, Optional

from pydantic import BaseModel

from moodjournal.models.mood import Mood

TrendDirection = Literal["up", "down", "stable"]


class MoodCount(BaseModel):
    mood: Mood
    label: str
    count: int
    percentage: float


class WeeklyTrend(BaseModel):
    this_week_average: float
    previous_week_average: float
    this_week_count: int
    previous_week_count: int
    direction: TrendDirection
    # The comparison is only shown when last week has data
    has_previous_week: bool


class MoodStats(BaseModel):
    total_entries: int
    distribution: List[MoodCount]
    most_common_mood: Optional[Mood] = None
    current_streak: int
    this_week_count: int
    weekly_trend: WeeklyTrend
