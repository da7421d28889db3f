# moodjournal/db/db_access.py

import logging
from typing import List, Optional
from datetime import date, datetime

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.dialects import postgresql, sqlite

from moodjournal.core.clock import get_today, get_now
from moodjournal.core.exceptions import ValidationError, NotFoundError
from moodjournal.models.mood import Mood
from moodjournal.models.mood_entry import MoodEntry, MoodEntryUpdate, parse_wire_date
from .models import MoodEntry as DBMoodEntry

logger = logging.getLogger(__name__)

# Dialects whose INSERT supports ON CONFLICT ... DO UPDATE
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _to_schema(row: DBMoodEntry) -> MoodEntry:
    return MoodEntry.model_validate(row)


def _commit(db: Session, action: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error {action}: {e}")
        raise


def _coerce_mood(mood) -> Mood:
    try:
        return Mood(mood)
    except ValueError:
        raise ValidationError(f"Unknown mood: {mood!r}")


# ------------------------------------------------------------------
# MOOD ENTRY FUNCTIONS
# ------------------------------------------------------------------

def upsert_mood_entry(
    db:         Session,
    user_id:    str,
    entry_date: date,
    mood:       Mood,
    note:       Optional[str] = None,
    *,
    today:      Optional[date] = None,
    now:        Optional[datetime] = None,
) -> MoodEntry:
    """
    Record the user's mood for ``entry_date``.

    If the user already has an entry for that date its mood and note are
    overwritten and ``updated_at`` is refreshed; ``id`` and ``created_at``
    stay as they were. The write is a single INSERT ... ON CONFLICT statement
    on the (user_id, date) unique constraint, so two concurrent submissions
    for the same day end with one row holding the last writer's values.

    Raises ``ValidationError`` when ``entry_date`` is after ``today``.
    """
    entry_date = parse_wire_date(entry_date)
    mood = _coerce_mood(mood)
    today = today or get_today()
    now = now or get_now()

    if entry_date > today:
        raise ValidationError(
            f"Cannot create mood entry for future date {entry_date.isoformat()}"
        )

    dialect = db.get_bind().dialect.name
    insert = _UPSERT_INSERTS.get(dialect)
    if insert is None:
        raise RuntimeError(f"Mood entry upsert is not supported on the {dialect!r} dialect")

    table = DBMoodEntry.__table__
    stmt = insert(table).values(
        user_id=user_id,
        date=entry_date,
        mood=mood,
        note=note,
        created_at=now,
        updated_at=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=["user_id", "date"],
        set_={
            "mood": stmt.excluded.mood,
            "note": stmt.excluded.note,
            "updated_at": stmt.excluded.updated_at,
        },
    )

    try:
        db.execute(stmt)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving mood entry for user {user_id} on {entry_date}: {e}")
        raise
    _commit(db, f"saving mood entry for user {user_id} on {entry_date}")

    row = (
        db.query(DBMoodEntry)
        .filter(DBMoodEntry.user_id == user_id, DBMoodEntry.date == entry_date)
        .one()
    )
    logger.debug(f"Saved mood entry {row.id} for user {user_id} on {entry_date}")
    return _to_schema(row)


def list_mood_entries(
    db:         Session,
    user_id:    str,
    start_date: Optional[date] = None,
    end_date:   Optional[date] = None,
) -> List[MoodEntry]:
    """Entries for a user, newest date first, within the inclusive date range."""
    query = db.query(DBMoodEntry).filter(DBMoodEntry.user_id == user_id)

    if start_date is not None:
        query = query.filter(DBMoodEntry.date >= start_date)
    if end_date is not None:
        query = query.filter(DBMoodEntry.date <= end_date)

    rows = query.order_by(DBMoodEntry.date.desc()).all()
    return [_to_schema(r) for r in rows]


def get_mood_entry_by_date(db: Session, user_id: str, entry_date: date) -> Optional[MoodEntry]:
    """The user's entry for ``entry_date``, or None when nothing was recorded."""
    row = (
        db.query(DBMoodEntry)
        .filter(DBMoodEntry.user_id == user_id, DBMoodEntry.date == entry_date)
        .first()
    )
    if not row:
        return None
    return _to_schema(row)


def update_mood_entry(
    db:       Session,
    entry_id: int,
    changes:  MoodEntryUpdate,
    *,
    now:      Optional[datetime] = None,
) -> MoodEntry:
    """
    Apply the fields set on ``changes`` to an existing entry.

    ``updated_at`` is refreshed even when ``changes`` is empty.
    """
    entry = db.get(DBMoodEntry, entry_id)
    if entry is None:
        raise NotFoundError(entry_id)

    provided = changes.model_fields_set
    if "mood" in provided and changes.mood is not None:
        entry.mood = changes.mood
    if "note" in provided:
        entry.note = changes.note
    entry.updated_at = now or get_now()

    _commit(db, f"updating mood entry {entry_id}")
    db.refresh(entry)
    return _to_schema(entry)


def delete_mood_entry(db: Session, entry_id: int) -> bool:
    """Delete an entry by id. A missing id raises ``NotFoundError``."""
    entry = db.get(DBMoodEntry, entry_id)
    if entry is None:
        raise NotFoundError(entry_id)

    db.delete(entry)
    _commit(db, f"deleting mood entry {entry_id}")
    return True
