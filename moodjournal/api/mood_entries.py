# moodjournal/api/mood_entries.py
from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional
from datetime import date, datetime
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from moodjournal.core.database import get_db
from moodjournal.core.clock import get_today, get_now
from moodjournal.db import db_access
from moodjournal.models.mood_entry import (
    MoodEntryCreate,
    MoodEntryUpdate,
    MoodEntry,
    DeleteResponse,
    parse_wire_date,
)
from moodjournal.models.analytics import MoodStats
from moodjournal.services import mood_analytics

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/mood_entries", tags=["Mood Entries"])


def _optional_date(value: Optional[str]) -> Optional[date]:
    return parse_wire_date(value) if value is not None else None


@router.post("/", response_model=MoodEntry)
def create_mood_entry(
    payload: MoodEntryCreate,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
    now: datetime = Depends(get_now),
):
    """Record the mood for a day, replacing any entry the user already has for it."""
    try:
        return db_access.upsert_mood_entry(
            db,
            payload.user_id,
            payload.date,
            payload.mood,
            payload.note,
            today=today,
            now=now,
        )
    except SQLAlchemyError:
        raise HTTPException(
            status_code=500,
            detail="Failed to save mood entry, please try again later."
        )


@router.get("/{user_id}", response_model=List[MoodEntry])
def get_mood_entries(
    user_id: str,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Get mood entries for a user, newest first, optionally within a date range."""
    return db_access.list_mood_entries(
        db,
        user_id,
        start_date=_optional_date(start_date),
        end_date=_optional_date(end_date),
    )


@router.get("/{user_id}/by_date/{entry_date}", response_model=Optional[MoodEntry])
def get_mood_entry_by_date(
    user_id: str,
    entry_date: str,
    db: Session = Depends(get_db),
):
    """Get the user's entry for one day; null when nothing was recorded."""
    return db_access.get_mood_entry_by_date(db, user_id, parse_wire_date(entry_date))


@router.get("/{user_id}/stats", response_model=MoodStats)
def get_mood_stats(
    user_id: str,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """Distribution, streak and weekly trend over all of the user's entries."""
    entries = db_access.list_mood_entries(db, user_id)
    return mood_analytics.summarize(entries, today)


@router.get("/{user_id}/search", response_model=List[MoodEntry])
def search_mood_entries(
    user_id: str,
    q: str = Query("", max_length=200),
    db: Session = Depends(get_db),
):
    """Search the user's history by mood label, note text or date."""
    entries = db_access.list_mood_entries(db, user_id)
    return mood_analytics.search_entries(entries, q)


@router.put("/{entry_id}", response_model=MoodEntry)
def update_mood_entry(
    entry_id: int,
    update: MoodEntryUpdate,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    """Update the mood and/or note of an existing entry."""
    try:
        return db_access.update_mood_entry(db, entry_id, update, now=now)
    except SQLAlchemyError:
        raise HTTPException(
            status_code=500,
            detail="Failed to update mood entry, please try again later."
        )


@router.delete("/{entry_id}", response_model=DeleteResponse)
def delete_mood_entry(
    entry_id: int,
    db: Session = Depends(get_db),
):
    """Delete a mood entry. Unknown ids are a 404, not a silent success."""
    try:
        db_access.delete_mood_entry(db, entry_id)
    except SQLAlchemyError:
        raise HTTPException(
            status_code=500,
            detail="Failed to delete mood entry, please try again later."
        )
    return DeleteResponse(success=True)
