# moodjournal/api/moods.py
from fastapi import APIRouter
from typing import List

from moodjournal.models.mood import MoodOption, mood_options

router = APIRouter(prefix="/moods", tags=["Moods"])


@router.get("/", response_model=List[MoodOption])
def list_moods():
    """The five moods with their labels, descriptions and trend scores."""
    return mood_options()
