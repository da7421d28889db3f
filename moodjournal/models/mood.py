# moodjournal/models/mood.py
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel


class Mood(str, Enum):
    """The five moods a user can record, in display order."""

    HAPPY   = "😊"
    SAD     = "😢"
    ANGRY   = "😡"
    EXCITED = "🤩"
    NEUTRAL = "😐"

    @property
    def label(self) -> str:
        return MOOD_LABELS[self]

    @property
    def description(self) -> str:
        return MOOD_DESCRIPTIONS[self]

    @property
    def score(self) -> int:
        return MOOD_SCORES[self]


MOOD_LABELS: Dict[Mood, str] = {
    Mood.HAPPY:   "Happy",
    Mood.SAD:     "Sad",
    Mood.ANGRY:   "Angry",
    Mood.EXCITED: "Excited",
    Mood.NEUTRAL: "Neutral",
}

MOOD_DESCRIPTIONS: Dict[Mood, str] = {
    Mood.HAPPY:   "Feeling good and positive",
    Mood.SAD:     "Feeling down or melancholy",
    Mood.ANGRY:   "Feeling frustrated or mad",
    Mood.EXCITED: "Feeling thrilled and energetic",
    Mood.NEUTRAL: "Feeling calm and balanced",
}

# Used only for trend averaging
MOOD_SCORES: Dict[Mood, int] = {
    Mood.HAPPY:   5,
    Mood.EXCITED: 4,
    Mood.NEUTRAL: 3,
    Mood.SAD:     2,
    Mood.ANGRY:   1,
}

DEFAULT_MOOD_SCORE = 3


def mood_score(mood) -> int:
    """Score for a mood or raw token; anything unrecognised scores 3."""
    try:
        return MOOD_SCORES[Mood(mood)]
    except ValueError:
        return DEFAULT_MOOD_SCORE


def mood_label(mood) -> Optional[str]:
    try:
        return MOOD_LABELS[Mood(mood)]
    except ValueError:
        return None


class MoodOption(BaseModel):
    mood: Mood
    label: str
    description: str
    score: int


def mood_options():
    return [
        MoodOption(mood=m, label=m.label, description=m.description, score=m.score)
        for m in Mood
    ]
