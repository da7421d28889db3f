from datetime import date, datetime, timedelta

import pytest

from moodjournal.core.exceptions import NotFoundError, ValidationError
from moodjournal.db import db_access
from moodjournal.db.models import MoodEntry as DBMoodEntry
from moodjournal.models.mood import Mood
from moodjournal.models.mood_entry import MoodEntryUpdate

TODAY = date(2024, 1, 20)
T0 = datetime(2024, 1, 20, 9, 0)


def _save(db, user_id, day, mood=Mood.HAPPY, note=None, now=T0):
    return db_access.upsert_mood_entry(db, user_id, day, mood, note, today=TODAY, now=now)


# ---------------------------------------------------------------- upsert ----

def test_upsert_creates_entry_with_matching_timestamps(db):
    entry = _save(db, "u1", date(2024, 1, 15), Mood.HAPPY, "ok")

    assert entry.id is not None
    assert entry.user_id == "u1"
    assert entry.date == date(2024, 1, 15)
    assert entry.mood == Mood.HAPPY
    assert entry.note == "ok"
    assert entry.created_at == T0
    assert entry.updated_at == T0


def test_upsert_without_note_stores_null(db):
    entry = _save(db, "u1", date(2024, 1, 15), Mood.NEUTRAL)
    assert entry.note is None


def test_repeated_upserts_keep_one_row_with_first_identity(db):
    first = _save(db, "u1", date(2024, 1, 15), Mood.HAPPY, "first", now=T0)
    moods = [Mood.SAD, Mood.EXCITED, Mood.ANGRY]
    last = None
    for i, mood in enumerate(moods, start=1):
        last = _save(db, "u1", date(2024, 1, 15), mood, f"call {i}", now=T0 + timedelta(minutes=i))

    assert db.query(DBMoodEntry).filter_by(user_id="u1", date=date(2024, 1, 15)).count() == 1
    assert last.id == first.id
    assert last.created_at == first.created_at
    assert last.mood == Mood.ANGRY
    assert last.note == "call 3"
    assert last.updated_at == T0 + timedelta(minutes=3)


def test_upsert_with_null_note_clears_existing_note(db):
    first = _save(db, "u1", date(2024, 1, 15), Mood.HAPPY, "ok")
    second = _save(db, "u1", date(2024, 1, 15), Mood.ANGRY, None)

    assert second.id == first.id
    assert second.mood == Mood.ANGRY
    assert second.note is None


def test_same_date_for_different_users_are_separate_rows(db):
    a = _save(db, "u1", date(2024, 1, 15), Mood.HAPPY)
    b = _save(db, "u2", date(2024, 1, 15), Mood.SAD)

    assert a.id != b.id
    assert db.query(DBMoodEntry).count() == 2


def test_upsert_accepts_today(db):
    entry = _save(db, "u1", TODAY)
    assert entry.date == TODAY


@pytest.mark.parametrize("now", [
    datetime(2024, 1, 20, 0, 0, 1),
    datetime(2024, 1, 20, 23, 59, 59),
])
def test_upsert_rejects_future_date_at_any_time_of_day(db, now):
    with pytest.raises(ValidationError, match="future date"):
        db_access.upsert_mood_entry(db, "u1", TODAY + timedelta(days=1), Mood.HAPPY, today=TODAY, now=now)
    assert db.query(DBMoodEntry).count() == 0


def test_upsert_accepts_wire_date_string(db):
    entry = db_access.upsert_mood_entry(db, "u1", "2024-01-15", "😊", today=TODAY, now=T0)
    assert entry.date == date(2024, 1, 15)
    assert entry.mood == Mood.HAPPY


@pytest.mark.parametrize("bad", ["2024-1-15", "15/01/2024", "2024-02-30", "2024-01-15T10:00:00"])
def test_upsert_rejects_malformed_dates(db, bad):
    with pytest.raises(ValidationError):
        db_access.upsert_mood_entry(db, "u1", bad, Mood.HAPPY, today=TODAY, now=T0)


def test_upsert_rejects_unknown_mood(db):
    with pytest.raises(ValidationError, match="Unknown mood"):
        db_access.upsert_mood_entry(db, "u1", date(2024, 1, 15), "🙂", today=TODAY, now=T0)


# ------------------------------------------------------------------ list ----

@pytest.fixture
def history(db):
    for day, mood in [
        (date(2024, 1, 10), Mood.SAD),
        (date(2024, 1, 12), Mood.HAPPY),
        (date(2024, 1, 15), Mood.EXCITED),
        (date(2024, 1, 18), Mood.NEUTRAL),
    ]:
        _save(db, "u1", day, mood)
    _save(db, "u2", date(2024, 1, 12), Mood.ANGRY)
    return db


def test_list_returns_only_the_users_entries_newest_first(history):
    entries = db_access.list_mood_entries(history, "u1")

    assert [e.date for e in entries] == [
        date(2024, 1, 18), date(2024, 1, 15), date(2024, 1, 12), date(2024, 1, 10),
    ]
    assert all(e.user_id == "u1" for e in entries)


def test_list_range_is_inclusive(history):
    entries = db_access.list_mood_entries(
        history, "u1", start_date=date(2024, 1, 12), end_date=date(2024, 1, 15)
    )
    assert [e.date for e in entries] == [date(2024, 1, 15), date(2024, 1, 12)]


def test_list_with_only_start_or_end(history):
    after = db_access.list_mood_entries(history, "u1", start_date=date(2024, 1, 15))
    before = db_access.list_mood_entries(history, "u1", end_date=date(2024, 1, 12))

    assert [e.date for e in after] == [date(2024, 1, 18), date(2024, 1, 15)]
    assert [e.date for e in before] == [date(2024, 1, 12), date(2024, 1, 10)]


def test_list_empty_or_inverted_range_returns_empty(history):
    assert db_access.list_mood_entries(history, "u1", date(2024, 1, 13), date(2024, 1, 14)) == []
    assert db_access.list_mood_entries(history, "u1", date(2024, 1, 18), date(2024, 1, 10)) == []
    assert db_access.list_mood_entries(history, "nobody") == []


# ----------------------------------------------------------- get by date ----

def test_get_by_date_finds_entry(history):
    entry = db_access.get_mood_entry_by_date(history, "u1", date(2024, 1, 15))
    assert entry is not None
    assert entry.mood == Mood.EXCITED


def test_get_by_date_miss_is_none(history):
    assert db_access.get_mood_entry_by_date(history, "u1", date(2024, 1, 11)) is None
    assert db_access.get_mood_entry_by_date(history, "u2", date(2024, 1, 15)) is None


# ---------------------------------------------------------------- update ----

def test_update_mood_only_keeps_note(db):
    entry = _save(db, "u1", date(2024, 1, 15), Mood.HAPPY, "keep me")
    later = T0 + timedelta(hours=1)

    updated = db_access.update_mood_entry(db, entry.id, MoodEntryUpdate(mood=Mood.SAD), now=later)

    assert updated.mood == Mood.SAD
    assert updated.note == "keep me"
    assert updated.updated_at == later


def test_update_note_only_keeps_mood(db):
    entry = _save(db, "u1", date(2024, 1, 15), Mood.HAPPY, "old")
    updated = db_access.update_mood_entry(db, entry.id, MoodEntryUpdate(note="new"), now=T0)

    assert updated.mood == Mood.HAPPY
    assert updated.note == "new"


def test_update_explicit_null_note_clears_it(db):
    entry = _save(db, "u1", date(2024, 1, 15), Mood.HAPPY, "old")
    updated = db_access.update_mood_entry(db, entry.id, MoodEntryUpdate(note=None), now=T0)

    assert updated.note is None


def test_update_without_fields_only_touches_updated_at(db):
    entry = _save(db, "u1", date(2024, 1, 15), Mood.HAPPY, "note")
    later = T0 + timedelta(days=1)

    updated = db_access.update_mood_entry(db, entry.id, MoodEntryUpdate(), now=later)

    assert updated.updated_at == later
    assert updated.model_dump(exclude={"updated_at"}) == entry.model_dump(exclude={"updated_at"})


def test_update_missing_entry_raises_not_found(db):
    with pytest.raises(NotFoundError, match="Mood entry with ID 99999 not found"):
        db_access.update_mood_entry(db, 99999, MoodEntryUpdate(mood=Mood.SAD), now=T0)


# ---------------------------------------------------------------- delete ----

def test_delete_removes_only_that_entry(db):
    keep = _save(db, "u1", date(2024, 1, 14))
    gone = _save(db, "u1", date(2024, 1, 15))

    assert db_access.delete_mood_entry(db, gone.id) is True

    remaining = db_access.list_mood_entries(db, "u1")
    assert [e.id for e in remaining] == [keep.id]


def test_delete_missing_entry_raises_not_found(db):
    with pytest.raises(NotFoundError):
        db_access.delete_mood_entry(db, 12345)


def test_delete_twice_fails_the_second_time(db):
    entry = _save(db, "u1", date(2024, 1, 15))
    db_access.delete_mood_entry(db, entry.id)
    with pytest.raises(NotFoundError):
        db_access.delete_mood_entry(db, entry.id)
